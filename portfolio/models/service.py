"""
제공 서비스 모델
"""

from sqlalchemy import Column, Integer, String, Text

from portfolio.core.database import Base


class Service(Base):
    """제공 서비스 (order_index 순 노출)"""

    __tablename__ = "services"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(200), nullable=False)
    description = Column(Text, default="")
    image_url = Column(String(500), default="")
    icon = Column(String(50), default="")
    order_index = Column(Integer, default=0, index=True)

    def __repr__(self) -> str:
        return f"<Service(id={self.id}, name={self.name}, order_index={self.order_index})>"
