"""Markdown building blocks shared by the renderer."""

import re


def header_slug(s: str) -> str:
    """Generate a GitHub-ish anchor slug: lower, hyphenate non-alnum."""
    s = s.strip().lower()
    s = re.sub(r"[^a-z0-9@_]+", "-", s)
    s = re.sub(r"-{2,}", "-", s).strip("-")
    return s or "section"


def md_heading(level: int, text: str) -> str:
    """Generate an ATX heading, clamped to the levels Markdown supports."""
    return f"{'#' * max(1, min(level, 6))} {text}"


def md_codeblock(lang: str, code: str) -> str:
    """Generate a Markdown code block."""
    return f"```{lang}\n{code.rstrip()}\n```"


def md_cell(text: str) -> str:
    """Make text safe for a single table cell."""
    return text.replace("|", "\\|").replace("\n", " ").strip()


def md_table(headers: list[str], rows: list[list[str]]) -> str:
    """Generate a Markdown table."""
    if not rows:
        return ""
    out = [
        "| " + " | ".join(headers) + " |",
        "| " + " | ".join(["---"] * len(headers)) + " |",
    ]
    out.extend("| " + " | ".join(md_cell(c) for c in r) + " |" for r in rows)
    return "\n".join(out)
