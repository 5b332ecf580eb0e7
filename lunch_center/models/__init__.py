from lunch_center.models.base import Base
from lunch_center.models.recommendation import Recommendation

__all__ = ["Base", "Recommendation"]
