"""Diagnostic formatting for completed exchanges."""

NO_CONTENT = 204


def format_response(status: int, body: str | None = None) -> str:
    """
    Render a completed exchange as ``"HTTP <status>\\n<body>"``.

    A 204 response always renders with an empty body segment, whatever the
    transport reported. Never raises.
    """
    if status == NO_CONTENT or body is None:
        body = ""
    return f"HTTP {status}\n{body}"
