"""
LanguageRepository: languages being learned with a 0..100 progress bar.

Progress is clamped on every write, so saturating updates (e.g. -500 or
+500) land on the bounds instead of erroring. Non-finite amounts are
rejected before anything is stored.
"""
import math
from typing import List, Optional

from core.config_manager import config
from core.exceptions import ValidationError
from core.models import Language, next_id
from core.repositories.base import BaseRepository
from core.utils import clamp


def _finite_number(value) -> bool:
    return (
        not isinstance(value, bool)
        and isinstance(value, (int, float))
        and math.isfinite(value)
    )


class LanguageRepository(BaseRepository):

    def list_languages(self) -> List[Language]:
        return self._load_list("languages", Language.from_dict)

    def get_language(self, language_id: int) -> Optional[Language]:
        for lang in self.list_languages():
            if lang.id == language_id:
                return lang
        return None

    def add_language(self, name: str) -> Optional[Language]:
        """Returns the new Language, or None when the store refused the write."""
        if not name or not name.strip():
            raise ValidationError("name", "language name must not be empty", name)

        lang = Language(id=next_id(), name=name.strip())
        languages = self.list_languages()
        languages.append(lang)
        if not self._save_list("languages", languages):
            self.logger.warning(f"Could not save language {lang.name}")
            return None
        self.logger.info(f"Added language {lang.name}")
        return lang

    def update_progress(self, language_id: int, value: float, relative: bool = False) -> Optional[Language]:
        """
        Set progress (or shift it by `value` when relative=True).

        Returns the updated Language, or None when the id is unknown. If the
        write fails the stored (unchanged) Language is returned.

        Raises:
            ValidationError: value is not a finite number.
        """
        if not _finite_number(value):
            raise ValidationError("progress", "must be a finite number", value)

        languages = self.list_languages()
        for lang in languages:
            if lang.id != language_id:
                continue
            target = lang.progress + value if relative else value
            lang.progress = int(clamp(round(target), config.PROGRESS_MIN, config.PROGRESS_MAX))
            if not self._save_list("languages", languages):
                self.logger.warning(f"Could not save progress for {lang.name}")
                return self.get_language(language_id)
            return lang

        self.logger.debug(f"update_progress: no language {language_id}")
        return None

    def step_progress(self, language_id: int, direction: int = 1) -> Optional[Language]:
        """Dashboard +/- button: move by PROGRESS_STEP."""
        return self.update_progress(
            language_id, config.PROGRESS_STEP * (1 if direction >= 0 else -1), relative=True
        )

    def log_hours(self, language_id: int, hours: float) -> Optional[Language]:
        if not _finite_number(hours) or hours <= 0:
            raise ValidationError("hours", "must be a finite number greater than 0", hours)

        languages = self.list_languages()
        for lang in languages:
            if lang.id == language_id:
                lang.hours_spent = lang.hours_spent + hours
                if not self._save_list("languages", languages):
                    self.logger.warning(f"Could not save hours for {lang.name}")
                    return self.get_language(language_id)
                return lang
        return None
