# /classboard/db/base.py

# Central registry for all SQLAlchemy models. Importing them here ensures the
# Base metadata knows about every table before `create_all` is called.

from .base_class import Base

from .models.class_models import Class, TeacherClass
from .models.gradebook_models import GradedAssignment, AssignmentSection, AssignmentScore
from .models.behavior_models import Behavior, RewardItem, Point
