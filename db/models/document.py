from datetime import datetime

from sqlalchemy import Text, func
from sqlalchemy.orm import Mapped, mapped_column

from db.models.base import Base


class Document(Base):
    __tablename__ = "documents"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(
        primary_key=True, autoincrement=True, unique=True, comment="ID"
    )

    title: Mapped[str] = mapped_column(Text, comment="Title")
    content: Mapped[str] = mapped_column(Text, comment="Content")
    source: Mapped[str] = mapped_column(Text, comment="Source")

    created_at: Mapped[datetime] = mapped_column(
        server_default=func.now(), index=True, comment="Created at"
    )
