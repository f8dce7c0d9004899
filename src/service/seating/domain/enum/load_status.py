from enum import StrEnum


class LoadStatus(StrEnum):
    LOADING = 'loading'
    READY = 'ready'
    UNAVAILABLE = 'unavailable'  # event or catalog request failed
    INTEGRITY_ERROR = 'integrity_error'  # catalog loaded but could not be merged
