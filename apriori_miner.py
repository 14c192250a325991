import math
import numbers
import sys
import time

from apriori_candidates import generate_candidates
from apriori_errors import ConfigurationError
from apriori_sinks import NullSink
from apriori_support import scan_level

DEFAULT_CHUNK_SIZE = 1000

# Stati della ricerca per livelli
LEVEL_1 = "LEVEL_1"
SCANNING = "SCANNING"
EXPANDING = "EXPANDING"
DONE = "DONE"


def validate_minsup(minsup):
    if isinstance(minsup, bool) or not isinstance(minsup, numbers.Real):
        raise ConfigurationError(f"Supporto minimo non numerico: {minsup!r}")
    if math.isnan(minsup) or minsup < 0 or minsup > 1:
        raise ConfigurationError(f"Supporto minimo fuori da [0, 1]: {minsup}")
    return float(minsup)


class MiningSession:
    """Stato di una singola esecuzione, passato esplicitamente alle fasi."""

    def __init__(self, store, minsup, sink=None, n_jobs=1, chunk_size=DEFAULT_CHUNK_SIZE, verbose=False):
        self.minsup = validate_minsup(minsup)
        if isinstance(n_jobs, bool) or not isinstance(n_jobs, int) or n_jobs == 0 or n_jobs < -1:
            raise ConfigurationError(f"n_jobs non valido: {n_jobs!r}")
        if isinstance(chunk_size, bool) or not isinstance(chunk_size, int) or chunk_size < 1:
            raise ConfigurationError(f"chunk_size non valido: {chunk_size!r}")
        self.store = store
        self.sink = sink if sink is not None else NullSink()
        self.n_jobs = n_jobs
        self.chunk_size = chunk_size
        self.verbose = verbose
        self.state = LEVEL_1
        self.level = 1
        self.levels = []
        self.num_frequent = 0
        self.start = None
        self.end = None

    def log(self, message):
        if self.verbose:
            print(message, file=sys.stderr)

    @property
    def elapsed(self):
        if self.start is None:
            return 0.0
        return (self.end if self.end is not None else time.time()) - self.start


class ItemsetMiner:
    def __init__(self, store, minsup, sink=None, n_jobs=1, chunk_size=DEFAULT_CHUNK_SIZE, verbose=False):
        # minsup viene validato qui, prima di qualsiasi scansione
        self.session = MiningSession(store, minsup, sink, n_jobs, chunk_size, verbose)

    def iter_levels(self):
        """Esegue la ricerca per livelli, restituendo gli itemset frequenti di ogni livello."""
        session = self.session
        store = session.store
        session.start = time.time()
        self._log_config()

        # Itemset di lunghezza 1: tutto l'universo, senza join
        candidates = [(item,) for item in range(store.num_items)]
        while candidates:
            session.state = SCANNING
            frequent = scan_level(session, candidates)
            if not frequent:
                break
            session.levels.append(frequent)
            session.num_frequent += len(frequent)
            session.log(f"Trovati {len(frequent)} itemset frequenti di dimensione {session.level} "
                        f"(supporto {session.minsup * 100}%)")
            yield frequent

            # Genera nuovi candidati di lunghezza k+1
            session.state = EXPANDING
            session.log(f"Creazione degli itemset di dimensione {session.level + 1} "
                        f"a partire da {len(frequent)} itemset di dimensione {session.level}...")
            candidates = generate_candidates(list(frequent))
            session.log(f"Creati {len(candidates)} itemset unici di dimensione {session.level + 1}")
            session.level += 1

        session.state = DONE
        session.end = time.time()
        session.log(f"Tempo di esecuzione: {session.elapsed:.2f} secondi")
        session.log(f"Trovati {session.num_frequent} itemset frequenti con supporto {session.minsup * 100}% "
                    f"(assoluto {round(store.num_transactions * session.minsup)})")

    def run(self):
        for _ in self.iter_levels():
            pass
        return self.session

    def _log_config(self):
        session = self.session
        session.log("********************** CONFIGURAZIONE **********************")
        session.log(f"Input: {session.store.num_items} item distinti, "
                    f"{session.store.num_transactions} transazioni")
        session.log(f"Supporto minimo = {session.minsup * 100}%")
        session.log("************************************************************")


def apriori(store, minsup, sink=None, n_jobs=1, chunk_size=DEFAULT_CHUNK_SIZE, verbose=False):
    """Restituisce la lista dei livelli: per ciascuno ``{itemset: supporto assoluto}``."""
    return ItemsetMiner(store, minsup, sink, n_jobs, chunk_size, verbose).run().levels


def iter_frequent_itemsets(store, minsup, n_jobs=1, chunk_size=DEFAULT_CHUNK_SIZE, verbose=False):
    """Generatore finito di coppie ``(itemset, count)``, livello per livello."""
    miner = ItemsetMiner(store, minsup, None, n_jobs, chunk_size, verbose)
    return (pair for frequent in miner.iter_levels() for pair in frequent.items())
