from dataclasses import dataclass


@dataclass(frozen=True)
class UserLoginInfo:
    """External login binding, keyed by provider and provider key.

    Attributes
    ----------
    login_provider
        Name of the external identity provider (e.g. "google")
    provider_key
        The user's identifier at that provider
    """

    login_provider: str
    provider_key: str
