"""Page chrome: the main layout wrapper and the HTML document shell."""

from .base import attr, text

STYLESHEET = "css/app.css"


class MainLayout:
    """Wrap page body markup in the main container."""

    def render(self, body: str = "") -> str:
        return f'<div id="main">{body}</div>'


def html_document(body: str, title: str, description: str = "") -> str:
    """Render a complete HTML document around body markup."""
    meta_description = (
        f'<meta name="description" content="{attr(description)}">' if description else ""
    )
    return (
        "<!DOCTYPE html>\n"
        '<html lang="en">\n'
        "<head>\n"
        '<meta charset="utf-8">\n'
        '<meta name="viewport" content="width=device-width, initial-scale=1.0">\n'
        f"<title>{text(title)}</title>\n"
        f"{meta_description}"
        f'<link rel="stylesheet" href="{STYLESHEET}">\n'
        "</head>\n"
        f"<body>\n{body}\n</body>\n"
        "</html>\n"
    )
