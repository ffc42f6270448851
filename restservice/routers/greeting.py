# restservice/routers/greeting.py

import logging

from fastapi import APIRouter, Depends

from restservice.common.deps import get_greeting_service
from restservice.models.greeting import Greeting
from restservice.services.greeting_service import GreetingService

router = APIRouter(tags=["greeting"])
logger = logging.getLogger(__name__)


@router.get("/greeting", response_model=Greeting)
async def greeting(
    name: str = GreetingService.DEFAULT_NAME,
    service: GreetingService = Depends(get_greeting_service),
):
    result = service.greet(name)
    logger.debug("Greeting %d sent: %s", result.id, result.content)
    return result
