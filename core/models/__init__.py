from .base import BaseModel
from .group import Group
from .organization import Organization
from .user_field import UserFieldGroup, UserFieldDefinition, UserFieldValue
from .user_image import UserImage
from .user import User
