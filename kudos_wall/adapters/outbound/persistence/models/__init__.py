# kudos_wall/adapters/outbound/persistence/models/__init__.py

from kudos_wall.adapters.outbound.persistence.models.base_model import Base
from kudos_wall.adapters.outbound.persistence.models.user_model import UserModel
from kudos_wall.adapters.outbound.persistence.models.team_model import TeamModel
from kudos_wall.adapters.outbound.persistence.models.category_model import CategoryModel
from kudos_wall.adapters.outbound.persistence.models.kudo_card_model import KudoCardModel

__all__ = [
    "Base",
    "UserModel",
    "TeamModel",
    "CategoryModel",
    "KudoCardModel",
]
