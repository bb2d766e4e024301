"""UserQuoteRepository: quotes written by the user, newest first."""
from typing import Iterable, List, Optional, Union

from core.exceptions import ValidationError
from core.models import UserQuote, next_id
from core.repositories.base import BaseRepository


def parse_tags(tags: Union[str, Iterable[str], None]) -> List[str]:
    """Accept "a, b,,c" or an iterable; trims and drops empty tags, keeps order."""
    if tags is None:
        return []
    parts = tags.split(",") if isinstance(tags, str) else list(tags)
    return [str(t).strip() for t in parts if str(t).strip()]


class UserQuoteRepository(BaseRepository):

    def list_quotes(self) -> List[UserQuote]:
        return self._load_list("user_quotes", UserQuote.from_dict)

    def add_quote(
        self,
        content: str,
        author: str,
        tags: Union[str, Iterable[str], None] = None,
    ) -> Optional[UserQuote]:
        """Returns the new quote, or None when the store refused the write."""
        if not content or not content.strip():
            raise ValidationError("content", "quote text must not be empty", content)
        if not author or not author.strip():
            raise ValidationError("author", "author must not be empty", author)

        quote = UserQuote(
            id=next_id(),
            content=content.strip(),
            author=author.strip(),
            tags=parse_tags(tags),
        )
        if not self._save_list("user_quotes", [quote] + self.list_quotes()):
            self.logger.warning(f"Could not save quote by {quote.author}")
            return None
        return quote

    def delete_quote(self, quote_id: int) -> List[UserQuote]:
        quotes = self.list_quotes()
        remaining = [q for q in quotes if q.id != quote_id]
        if len(remaining) != len(quotes):
            if not self._save_list("user_quotes", remaining):
                self.logger.warning(f"Could not delete quote {quote_id}")
                return quotes
        return remaining

    def get_quote(self, quote_id: int) -> Optional[UserQuote]:
        return next((q for q in self.list_quotes() if q.id == quote_id), None)
