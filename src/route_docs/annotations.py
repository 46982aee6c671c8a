"""Markers that keep handler parameters and operations out of the docs."""


class ApiIgnore:
    """Exclude a parameter or operation from the generated documentation.

    Use it as the parameter type, or as metadata::

        async def handler(debug: Annotated[bool, ApiIgnore()]): ...
    """

    def __init__(self, reason: str = ""):
        self.reason = reason
