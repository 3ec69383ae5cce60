"""
Domain exceptions

Services report ordinary business-rule failures with ValueError; the types
below are for failures a caller is not expected to recover from.
"""


class ChamberNotFoundError(LookupError):
    """Raised when a chamber lookup by key finds nothing."""

    def __init__(self, chamber_id):
        self.chamber_id = chamber_id
        super().__init__(f"Chamber {chamber_id} does not exist")
