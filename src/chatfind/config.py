"""Configuration for chatfind."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Config:
    """Presenter and navigation configuration."""

    self_handle: str = ""
    contact_route: str = "fm/chat/p/"
    highlight_tag: str = "strong"
    no_results_label: str = "No results"
    search_messages_label: str = "[A]Search messages[/A] instead?"
    private_mode: str = "private"

    def contact_path(self, contact_id: str) -> str:
        return f"{self.contact_route}{contact_id}"

    @property
    def search_messages_markup(self) -> str:
        """Inline call-to-action with its link placeholders substituted."""
        return self.search_messages_label.replace("[A]", "<a>").replace("[/A]", "</a>")
