import numbers

import numpy as np
import pandas as pd

from apriori_errors import FormatError, NotFoundError

# Limite degli id: interi a 32 bit con segno
MAX_ITEM = 2**31 - 1


def parse_item(token, where):
    # Solo interi decimali non negativi (niente segni, spazi o cifre non ASCII)
    if not (token.isascii() and token.isdigit()):
        raise FormatError(f"{where}: item non valido {token!r} (atteso un intero >= 0)")
    item = int(token)
    if item > MAX_ITEM:
        raise FormatError(f"{where}: item {token} oltre il massimo consentito ({MAX_ITEM})")
    return item


def parse_line(line, where):
    return tuple(sorted({parse_item(token, where) for token in line.split()}))


class TransactionStore:
    """Dataset di transazioni, immutabile dopo la costruzione.

    Ogni transazione e' una tupla ordinata di item distinti. L'universo
    degli item e' ``range(num_items)`` con ``num_items = 1 + max(item)``.
    Le scansioni passano da ``iterate()``, che riparte dall'inizio a ogni
    chiamata.
    """

    def __init__(self, transactions, source="<memory>"):
        # Tuple ordinate di item distinti; le transazioni vuote non contano
        self.transactions = tuple(tuple(sorted(set(t))) for t in transactions if len(t))
        self.source = source
        self.num_transactions = len(self.transactions)
        self.num_items = 1 + max((t[-1] for t in self.transactions), default=-1)
        self._matrix = None

    # Carica le transazioni da file (una transazione per riga, item separati da spazio)
    @classmethod
    def from_file(cls, path):
        try:
            with open(path, encoding="utf-8") as f:
                transactions = cls._parse_lines(f, str(path))
        except (FileNotFoundError, IsADirectoryError, PermissionError) as exc:
            raise NotFoundError(f"Dataset non trovato: {path}") from exc
        except UnicodeDecodeError as exc:
            raise FormatError(f"{path}: il file non e' testo UTF-8") from exc
        return cls(transactions, source=str(path))

    @classmethod
    def from_lines(cls, lines, source="<lines>"):
        return cls(cls._parse_lines(lines, source), source=source)

    @staticmethod
    def _parse_lines(lines, source):
        transactions = []
        for lineno, line in enumerate(lines, start=1):
            if not line.strip():
                continue
            transactions.append(parse_line(line, f"{source}:{lineno}"))
        return transactions

    @classmethod
    def from_transactions(cls, transactions, source="<memory>"):
        parsed = []
        for index, transaction in enumerate(transactions):
            items = set()
            for item in transaction:
                if (isinstance(item, bool) or not isinstance(item, numbers.Integral)
                        or not 0 <= item <= MAX_ITEM):
                    raise FormatError(f"{source}[{index}]: item non valido {item!r} "
                                      f"(atteso un intero in [0, {MAX_ITEM}])")
                items.add(int(item))
            # Le transazioni vuote sono trattate come righe vuote
            if items:
                parsed.append(tuple(sorted(items)))
        return cls(parsed, source=source)

    # Formato "long": una riga per coppia (tid, item)
    @classmethod
    def from_long_csv(cls, path, tid_col="tid", item_col="item"):
        try:
            df = pd.read_csv(path, dtype=str, keep_default_na=False)
        except (FileNotFoundError, IsADirectoryError, PermissionError) as exc:
            raise NotFoundError(f"Dataset non trovato: {path}") from exc
        except pd.errors.EmptyDataError as exc:
            raise FormatError(f"{path}: file CSV vuoto") from exc
        missing = [col for col in (tid_col, item_col) if col not in df.columns]
        if missing:
            raise FormatError(f"{path}: colonne mancanti {missing}")
        # Raggruppa per transaction id e crea una transazione per ciascun gruppo
        transactions = []
        for tid, items in df.groupby(tid_col, sort=False)[item_col].apply(list).items():
            where = f"{path}: tid {tid}"
            transactions.append(tuple(sorted({parse_item(str(item).strip(), where) for item in items})))
        return cls(transactions, source=str(path))

    def __len__(self):
        return self.num_transactions

    def __repr__(self):
        return (f"TransactionStore(source={self.source!r}, "
                f"num_items={self.num_items}, num_transactions={self.num_transactions})")

    def indicator(self, index):
        """Vettore booleano su ``range(num_items)``: True dove l'item e' presente."""
        trans = np.zeros(self.num_items, dtype=bool)
        trans[list(self.transactions[index])] = True
        return trans

    @property
    def matrix(self):
        # Costruita una sola volta e riusata a ogni livello
        if self._matrix is None:
            matrix = np.zeros((self.num_transactions, self.num_items), dtype=bool)
            for row, transaction in enumerate(self.transactions):
                matrix[row, list(transaction)] = True
            matrix.flags.writeable = False
            self._matrix = matrix
        return self._matrix

    def iterate(self):
        """Nuovo generatore di indicatori, dalla prima transazione."""
        matrix = self.matrix
        return (matrix[row] for row in range(self.num_transactions))
