from sqlalchemy import Text
from sqlalchemy.orm import Mapped, mapped_column
from quote_api.db.session import Base
from quote_api.models.common import UUIDMixin, TimestampMixin

class Quote(Base, UUIDMixin, TimestampMixin):
    __tablename__ = "quotes"
    book: Mapped[str] = mapped_column(Text, nullable=False)
    quote: Mapped[str] = mapped_column(Text, nullable=False)
