from enum import Enum
import sqlalchemy as sa
from sqlalchemy import Column


class SkillCategory(str, Enum):
    TECHNOLOGY = 'Technology'
    ARTS_AND_CRAFTS = 'Arts & Crafts'
    MUSIC = 'Music'
    LANGUAGES = 'Languages'
    SPORTS_AND_FITNESS = 'Sports & Fitness'
    COOKING = 'Cooking'
    BUSINESS = 'Business'
    WRITING = 'Writing'
    PHOTOGRAPHY = 'Photography'
    GARDENING = 'Gardening'
    REPAIR_AND_MAINTENANCE = 'Repair & Maintenance'
    TEACHING = 'Teaching'
    HEALTH_AND_WELLNESS = 'Health & Wellness'
    OTHER = 'Other'


class SkillLevel(str, Enum):
    BEGINNER = 'Beginner'
    INTERMEDIATE = 'Intermediate'
    ADVANCED = 'Advanced'
    EXPERT = 'Expert'


class TimeFrame(str, Enum):
    UNSET = ''
    ONE_TO_TWO_HOURS = '1-2 hours'
    THREE_TO_FIVE_HOURS = '3-5 hours'
    ONE_DAY = '1 day'
    TWO_TO_THREE_DAYS = '2-3 days'
    ONE_WEEK = '1 week'
    TWO_PLUS_WEEKS = '2+ weeks'
    ONGOING = 'Ongoing'


class SkillType(str, Enum):
    OFFERED = 'offered'
    WANTED = 'wanted'


class SwapStatus(str, Enum):
    PENDING = 'pending'
    ACCEPTED = 'accepted'
    DECLINED = 'declined'
    IN_PROGRESS = 'in-progress'
    COMPLETED = 'completed'


def enum_column(enum_cls: type[Enum], name: str, index: bool = False) -> Column:
    return Column(
        sa.Enum(
            enum_cls,
            values_callable=lambda enum: [item.value for item in enum],
            name=name,
        ),
        nullable=False,
        index=index,
    )
