# kudos_wall/application/dtos/base_dto.py

"""
Base class for the application's DTOs.

JSON payloads use camelCase keys (``createdAt``, ``recipientName``) while
Python code keeps snake_case attributes. Inputs are accepted in either form.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CustomBaseModel(BaseModel):
    """
    Custom base model for all DTOs.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )
