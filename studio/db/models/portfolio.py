from sqlalchemy import Column, Integer, String, Text
from .base import Base


class PortfolioItem(Base):
    __tablename__ = 'portfolio_items'
    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=False)
    image = Column(Text, nullable=False)
    category = Column(String(50), nullable=False, index=True)
