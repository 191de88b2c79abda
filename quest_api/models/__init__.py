from quest_api.models.boost import Boost, BoostQuest, boost_quests
from quest_api.models.completed_task import CompletedTask
from quest_api.models.quests import Quest
from quest_api.models.task import Task

__all__ = ["Boost", "BoostQuest", "CompletedTask", "Quest", "Task", "boost_quests"]
