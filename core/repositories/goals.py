"""
GoalRepository: coding goals, persisted as one ordered list.

Goals are appended in creation order and never re-sorted. After creation
only `completed` changes; the other mutation is delete. A mutation whose
write fails leaves the stored list as it was and reports that state.
"""
from typing import Dict, List, Optional, Union

from core.exceptions import ValidationError
from core.models import Goal, GoalFilter, Priority, next_id
from core.repositories.base import BaseRepository
from core.stats import goal_summary


def filter_goals(goals: List[Goal], mode: Union[GoalFilter, str] = GoalFilter.ALL) -> List[Goal]:
    """Goals visible under a dashboard filter tab."""
    try:
        mode = GoalFilter(mode)
    except ValueError:
        raise ValidationError("filter", f"unknown filter '{mode}'", mode)

    if mode == GoalFilter.ACTIVE:
        return [g for g in goals if not g.completed]
    if mode == GoalFilter.COMPLETED:
        return [g for g in goals if g.completed]
    if mode == GoalFilter.HIGH:
        return [g for g in goals if g.priority == Priority.HIGH]
    return list(goals)


class GoalRepository(BaseRepository):

    def list_goals(self) -> List[Goal]:
        return self._load_list("goals", Goal.from_dict)

    def add_goal(self, text: str, priority: Union[Priority, str] = Priority.MEDIUM) -> Optional[Goal]:
        """
        Append a new, not yet completed goal.

        Returns the goal, or None when the store refused the write.

        Raises:
            ValidationError: text is empty/whitespace or priority is unknown.
        """
        if not text or not text.strip():
            raise ValidationError("text", "goal text must not be empty", text)
        try:
            priority = Priority(priority)
        except ValueError:
            raise ValidationError("priority", "expected low, medium or high", priority)

        goal = Goal(id=next_id(), text=text.strip(), priority=priority)
        goals = self.list_goals()
        goals.append(goal)
        if not self._save_list("goals", goals):
            self.logger.warning(f"Could not save goal: {goal.text}")
            return None
        self.logger.info(f"Added goal {goal.id} ({priority.value}): {goal.text}")
        return goal

    def toggle_goal(self, goal_id: int) -> List[Goal]:
        goals = self.list_goals()
        matched = False
        for goal in goals:
            if goal.id == goal_id:
                goal.completed = not goal.completed
                matched = True
        if matched:
            if not self._save_list("goals", goals):
                self.logger.warning(f"Could not toggle goal {goal_id}")
                return self.list_goals()
        else:
            self.logger.debug(f"toggle_goal: no goal {goal_id}")
        return goals

    def delete_goal(self, goal_id: int) -> List[Goal]:
        goals = self.list_goals()
        remaining = [g for g in goals if g.id != goal_id]
        if len(remaining) != len(goals):
            if not self._save_list("goals", remaining):
                self.logger.warning(f"Could not delete goal {goal_id}")
                return goals
            self.logger.info(f"Deleted goal {goal_id}")
        return remaining

    def summary(self) -> Dict[str, int]:
        return goal_summary(self.list_goals())
