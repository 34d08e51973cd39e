# store/exceptions.py

class StoreError(Exception):
    pass


class StoreUnavailable(StoreError):
    pass
