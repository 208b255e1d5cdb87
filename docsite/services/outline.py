"""Table-of-contents extraction from rendered document HTML."""

from typing import List, NamedTuple

from bs4 import BeautifulSoup

_OUTLINE_TAGS = ("h2", "h3")


class OutlineHeading(NamedTuple):
    level: int
    id: str
    text: str


def extract_outline(html: str) -> List[OutlineHeading]:
    """Return the h2/h3 headings of *html* that carry an anchor id, in order."""
    soup = BeautifulSoup(html, "lxml")
    outline: List[OutlineHeading] = []
    for heading in soup.find_all(_OUTLINE_TAGS):
        anchor = heading.get("id")
        if not anchor:
            continue
        text = " ".join(heading.get_text(" ", strip=True).split())
        outline.append(OutlineHeading(level=int(heading.name[1]), id=str(anchor), text=text))
    return outline
