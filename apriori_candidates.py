from apriori_errors import InvariantError


def join_pair(x, y):
    """Unisce due itemset di dimensione k in un candidato di dimensione k+1.

    Restituisce None se Y ha piu' di un item assente da X: i due itemset
    condividono meno di k-1 item e non si possono unire.
    """
    missing = [item for item in y if item not in x]
    if not missing:
        raise InvariantError(f"Join tra itemset uguali: {x} e {y}")
    if len(missing) > 1:
        return None
    return tuple(sorted(x + (missing[0],)))


# Genera i candidati di dimensione k+1 confrontando ogni coppia di itemset frequenti.
# Solo il passo di join: un candidato resta anche se non tutti i suoi
# sottoinsiemi di dimensione k sono frequenti.
def generate_candidates(itemsets):
    itemsets = [tuple(sorted(itemset)) for itemset in itemsets]
    if not itemsets:
        return []
    size = len(itemsets[0])
    if any(len(itemset) != size for itemset in itemsets):
        raise InvariantError(f"Itemset di dimensioni diverse nello stesso livello (atteso {size})")

    # dict come insieme ordinato: la chiave e' la tupla ordinata stessa
    candidates = {}
    for i, x in enumerate(itemsets):
        for y in itemsets[i + 1:]:
            candidate = join_pair(x, y)
            if candidate is not None:
                candidates.setdefault(candidate, None)
    return list(candidates)
