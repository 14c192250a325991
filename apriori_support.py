import numpy as np
from joblib import Parallel, delayed


# Conta, per un gruppo di candidati, le transazioni che li contengono.
# rows: sequenza di indicatori booleani, uno per transazione
def support_worker_chunk(candidates_chunk, rows):
    items = [np.asarray(candidate, dtype=np.intp) for candidate in candidates_chunk]
    count = [0] * len(items)
    for trans in rows:
        for c, cand in enumerate(items):
            if trans[cand].all():
                count[c] += 1
    return count


# Conta il supporto degli itemset con una scansione completa del dataset
def count_support(candidates, store):
    count = support_worker_chunk(candidates, store.iterate())
    return dict(zip(candidates, count))


# Conta il supporto usando joblib su chunk di candidati
def count_support_joblib(candidates, store, n_jobs, chunk_size):
    chunks = [candidates[i:i + chunk_size] for i in range(0, len(candidates), chunk_size)]
    results = Parallel(n_jobs=n_jobs, backend="loky")(
        delayed(support_worker_chunk)(chunk, store.matrix) for chunk in chunks
    )
    merged = {}
    for chunk, partial in zip(chunks, results):
        merged.update(zip(chunk, partial))
    return merged


def is_frequent(count, n_transactions, minsup):
    if n_transactions == 0:
        return False
    return (count / n_transactions) >= minsup


# Filtra itemset con supporto >= minsup, mantenendo il conteggio assoluto
def filter_frequent(support_count, minsup, n_transactions):
    return {
        itemset: count
        for itemset, count in support_count.items()
        if is_frequent(count, n_transactions, minsup)
    }


def scan_level(session, candidates):
    """Una passata sul dataset per il livello corrente.

    Ogni candidato frequente viene inviato una volta al sink della sessione
    con il suo supporto assoluto; gli altri vengono scartati. Restituisce
    il dizionario ``{itemset: count}`` dei frequenti.
    """
    store = session.store
    session.log(f"Lettura dei dati per calcolare la frequenza di {len(candidates)} "
                f"itemset di dimensione {len(candidates[0])}...")
    if session.n_jobs == 1:
        support_count = count_support(candidates, store)
    else:
        support_count = count_support_joblib(candidates, store, session.n_jobs, session.chunk_size)
    frequent = filter_frequent(support_count, session.minsup, store.num_transactions)
    for itemset, count in frequent.items():
        session.sink.report(itemset, count)
    return frequent
