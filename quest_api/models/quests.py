from sqlalchemy import Boolean, Column, Integer, String
from quest_api.database import Base


class Quest(Base):
    __tablename__ = "quests"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=True)
    disabled = Column(Boolean, nullable=False, default=False)   # hides every task of the quest
