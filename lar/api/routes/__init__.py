from fastapi import APIRouter
from . import auth, users, homes, tasks

router = APIRouter()

router.include_router(auth.router, prefix="/auth", tags=["Auth"])
router.include_router(users.router, prefix="/users", tags=["Users"])
router.include_router(homes.router, prefix="/homes", tags=["Homes"])
router.include_router(tasks.router, prefix="/tasks", tags=["Tasks"])
