from sqlalchemy import Column, Integer, String, Text

from shortlink_app.database.connection import Base


class Link(Base):
    """
    A short id pointing at a target URL.

    The id is generated by the service and never changes; only target_url
    is updated. Links are never deleted.
    """
    __tablename__ = "links"

    id = Column(String, primary_key=True)
    target_url = Column(Text, nullable=False)


class LinkStatistic(Base):
    """
    One redirect event.

    Append-only. link_id is not a foreign key: rows are kept even if the
    link they point at is gone.
    """
    __tablename__ = "link_statistics"

    # Row identity only, never exposed
    id = Column(Integer, primary_key=True, autoincrement=True)
    link_id = Column(String, nullable=False, index=True)
    referer = Column(Text, nullable=True)
    user_agent = Column(Text, nullable=True)
