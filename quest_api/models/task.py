from sqlalchemy import JSON, Column, Integer, String, Text
from quest_api.database import Base


class Task(Base):
    __tablename__ = "tasks"

    # Storage key; the public identity is `id`
    row_id = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(Integer, unique=True, index=True, nullable=False)
    quest_id = Column(Integer, index=True, nullable=False)

    # Catalog rows are imported loosely, required-ness is enforced on projection
    name = Column(String, nullable=True)
    href = Column(String, nullable=True)
    cta = Column(String, nullable=True)
    verify_endpoint = Column(String, nullable=True)
    verify_endpoint_type = Column(String, nullable=True)     # quiz, default, ...
    verify_redirect = Column(String, nullable=True)
    desc = Column(Text, nullable=True)
    quiz_name = Column(Integer, nullable=True)
    calls = Column(JSON, nullable=True)
    contracts = Column(JSON, nullable=True)
    api_url = Column(String, nullable=True)
    regex = Column(String, nullable=True)
    overwrite_order = Column(Integer, nullable=True)
