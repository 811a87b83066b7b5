# wikisummary/formatter.py
import textwrap


class Formatter:
    def __init__(self, fill_column: int = 70):
        self.fill_column = fill_column

    def reflow(self, text: str) -> str:
        """
        Fill each paragraph to the fill column. Extracts separate paragraphs
        with single newlines; blank lines are kept as they are.
        """
        paragraphs = []
        for line in text.strip().split("\n"):
            if not line.strip():
                paragraphs.append("")
                continue
            paragraphs.append(
                textwrap.fill(
                    line.strip(),
                    width=self.fill_column,
                    break_long_words=False,
                    break_on_hyphens=False,
                )
            )
        return "\n".join(paragraphs)
