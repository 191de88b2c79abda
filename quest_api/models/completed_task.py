from sqlalchemy import Column, DateTime, Integer, String, UniqueConstraint, func
from quest_api.database import Base


class CompletedTask(Base):
    __tablename__ = "completed_tasks"

    row_id = Column(Integer, primary_key=True, autoincrement=True)
    task_id = Column(Integer, index=True, nullable=False)
    address = Column(String, index=True, nullable=False)  # canonical decimal felt
    completed_at = Column(DateTime, server_default=func.now())
    __table_args__ = (UniqueConstraint("task_id", "address", name="_task_address_uc"),)
