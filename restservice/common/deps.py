# restservice/common/deps.py

from fastapi import Request

from restservice.services.greeting_service import GreetingService


def get_greeting_service(request: Request) -> GreetingService:
    # built once per app in create_app()
    return request.app.state.greeting_service
