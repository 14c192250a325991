import argparse
import os
import sys

from apriori_errors import AprioriError
from apriori_miner import DEFAULT_CHUNK_SIZE, ItemsetMiner, validate_minsup
from apriori_sinks import ConsoleSink
from apriori_transactions import TransactionStore

DEFAULT_DATASET = "default.txt"
DEFAULT_MINSUP = 0.8


# Chiede il file del dataset; se non esiste usa quello di default
def ask_dataset():
    filename = input("Inserisci il nome del file delle transazioni: ").strip()
    if not os.path.exists(filename):
        print(f"File non trovato. Verra' usato il dataset di default \"{DEFAULT_DATASET}\"")
        filename = DEFAULT_DATASET
    return filename


# Chiede il supporto minimo; valori non validi ricadono su DEFAULT_MINSUP
def ask_minsup():
    answer = input("Inserisci il supporto minimo (0 < input < 1): ")
    try:
        support = float(answer)
    except ValueError:
        support = None
    if support is None or not 0 <= support <= 1:
        print(f"Valore non valido. Supporto minimo impostato a {DEFAULT_MINSUP}")
        support = DEFAULT_MINSUP
    return support


def build_parser():
    parser = argparse.ArgumentParser(
        prog="apriori",
        description="Itemset frequenti con Apriori (una transazione per riga, item interi separati da spazi)",
    )
    parser.add_argument("dataset", nargs="?", help="file delle transazioni (chiesto se assente)")
    parser.add_argument("minsup", nargs="?", type=float, help="supporto minimo in [0, 1] (chiesto se assente)")
    parser.add_argument("--long", action="store_true", help="CSV in formato long con colonne tid,item")
    parser.add_argument("--n-jobs", type=int, default=1, help="processi joblib per il conteggio (default: 1)")
    parser.add_argument("--chunk-size", type=int, default=DEFAULT_CHUNK_SIZE,
                        help=f"candidati per chunk con --n-jobs (default: {DEFAULT_CHUNK_SIZE})")
    parser.add_argument("--quiet", action="store_true", help="nessun messaggio di avanzamento su stderr")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    dataset = args.dataset if args.dataset is not None else ask_dataset()
    minsup = args.minsup if args.minsup is not None else ask_minsup()

    try:
        validate_minsup(minsup)
        if args.long:
            store = TransactionStore.from_long_csv(dataset)
        else:
            store = TransactionStore.from_file(dataset)
        miner = ItemsetMiner(store, minsup, ConsoleSink(store.num_transactions),
                             n_jobs=args.n_jobs, chunk_size=args.chunk_size, verbose=not args.quiet)
        session = miner.run()
    except AprioriError as exc:
        print(f"Errore: {exc}", file=sys.stderr)
        return 1

    if not args.quiet:
        for i, level in enumerate(session.levels):
            print(f"Livello {i+1} - {len(level)} itemset trovati", file=sys.stderr)
    return 0


if __name__ == '__main__':
    sys.exit(main())
