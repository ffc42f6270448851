# restservice/services/greeting_service.py

from restservice.common.counter import AtomicCounter
from restservice.models.greeting import Greeting


class GreetingService:

    TEMPLATE = "Hello, {}!"
    DEFAULT_NAME = "World"

    def __init__(self, counter: AtomicCounter):
        self.counter = counter

    def greet(self, name: str = DEFAULT_NAME) -> Greeting:
        # one id per greeting, drawn before rendering
        return Greeting(id=self.counter.next(), content=self.TEMPLATE.format(name))
