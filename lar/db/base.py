# Import every model so Base.metadata knows all tables before create_all()
from ..models.user import User
from ..models.home import Home
from ..models.task import Task, TaskPriority, TaskStatus
from ..db.base_class import Base
