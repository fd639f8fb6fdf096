"""Errors raised while acquiring source data."""


class SourceLookupError(Exception):
    """A source (profile, web research, LinkedIn analysis) could not be read."""

    def __init__(self, source: str, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f"{source} lookup failed: {reason}")


class ProfileNotFoundError(SourceLookupError):
    """No profile record exists for the requested person."""

    def __init__(self, person_id: str):
        self.person_id = person_id
        super().__init__("profile", f"profile not found: {person_id}")
