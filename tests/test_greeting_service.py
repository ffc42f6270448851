# tests/test_greeting_service.py

from restservice.common.counter import AtomicCounter
from restservice.services.greeting_service import GreetingService


def test_greet_default_name():
    service = GreetingService(counter=AtomicCounter())
    greeting = service.greet()
    assert greeting.id == 1
    assert greeting.content == "Hello, World!"


def test_greet_uses_name_verbatim():
    service = GreetingService(counter=AtomicCounter())
    assert service.greet("User").content == "Hello, User!"
    assert service.greet("").content == "Hello, !"
    assert service.greet("{0}").content == "Hello, {0}!"


def test_greet_draws_one_id_per_call():
    counter = AtomicCounter()
    service = GreetingService(counter=counter)
    ids = [service.greet("x").id for _ in range(5)]
    assert ids == [1, 2, 3, 4, 5]
    assert counter.peek() == 6
