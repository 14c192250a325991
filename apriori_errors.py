# Eccezioni comuni a tutti i moduli apriori_*


class AprioriError(Exception):
    pass


# minsup fuori da [0, 1] o parametri di esecuzione non validi
class ConfigurationError(AprioriError, ValueError):
    pass


# Dataset mancante o non leggibile
class NotFoundError(AprioriError, FileNotFoundError):
    pass


# Token non valido in una transazione
class FormatError(AprioriError, ValueError):
    pass


# Errore logico interno (es. join tra due itemset identici)
class InvariantError(AprioriError, RuntimeError):
    pass
