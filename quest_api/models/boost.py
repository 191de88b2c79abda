from sqlalchemy import BigInteger, Boolean, Column, ForeignKey, Integer, String, Table
from sqlalchemy.orm import relationship
from quest_api.database import Base

boost_quests = Table(
    "boost_quests",
    Base.metadata,
    Column("boost_id", Integer, ForeignKey("boosts.id", ondelete="CASCADE"), primary_key=True),
    Column("quest_id", Integer, primary_key=True, index=True),
)


class Boost(Base):
    __tablename__ = "boosts"

    id = Column(Integer, primary_key=True, index=True)
    amount = Column(Integer, nullable=False)
    token = Column(String, nullable=False)
    num_of_winners = Column(BigInteger, nullable=False)
    token_decimals = Column(BigInteger, nullable=False)
    expiry = Column(BigInteger, nullable=False)           # unix millis
    name = Column(String, nullable=False)
    img_url = Column(String, nullable=False)
    winner = Column(String, nullable=True)
    hidden = Column(Boolean, nullable=False, default=False)

    quest_links = relationship("BoostQuest", cascade="all, delete-orphan")

    @property
    def quests(self) -> list[int]:
        return [link.quest_id for link in self.quest_links]


class BoostQuest(Base):
    __table__ = boost_quests
