import sys

import pandas as pd


class ResultSink:
    """Riceve ogni itemset frequente trovato, con il suo supporto assoluto."""

    def report(self, itemset, support):
        raise NotImplementedError


class NullSink(ResultSink):
    def report(self, itemset, support):
        pass


# Stampa ogni itemset con supporto relativo e assoluto
class ConsoleSink(ResultSink):
    def __init__(self, n_transactions, stream=None):
        self.n_transactions = n_transactions
        self.stream = stream if stream is not None else sys.stdout

    def report(self, itemset, support):
        ratio = support / self.n_transactions
        print(f"{list(itemset)}  (supporto: {ratio}; supporto assoluto: {support})", file=self.stream)


# Uso come libreria: notifica un listener registrato a ogni itemset trovato
class CallbackSink(ResultSink):
    def __init__(self, listener, with_support=False):
        self.listener = listener
        self.with_support = with_support

    def report(self, itemset, support):
        if self.with_support:
            self.listener(itemset, support)
        else:
            self.listener(itemset)


class CollectingSink(ResultSink):
    def __init__(self):
        self.results = []

    def report(self, itemset, support):
        self.results.append((itemset, support))

    def __len__(self):
        return len(self.results)

    def to_frame(self, n_transactions):
        """DataFrame con colonne ``support``, ``count`` e ``itemsets`` (frozenset)."""
        counts = [count for _, count in self.results]
        return pd.DataFrame({
            "support": [count / n_transactions for count in counts],
            "count": counts,
            "itemsets": [frozenset(itemset) for itemset, _ in self.results],
        }, columns=["support", "count", "itemsets"])
