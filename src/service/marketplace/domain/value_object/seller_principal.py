import attrs


@attrs.frozen
class SellerPrincipal:
    """Authenticated identity attached to a request (never carries the password)"""

    id: int
    email: str
