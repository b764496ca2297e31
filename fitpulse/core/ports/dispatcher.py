from typing import Callable, Generic, Optional, Protocol, TypeVar, runtime_checkable

T = TypeVar('T')


@runtime_checkable
class Receiver(Generic[T], Protocol):
    def try_receive(self) -> Optional[T]:
        ...


@runtime_checkable
class Dispatcher(Protocol):
    def spawn(self, task: Callable[[], T]) -> Receiver[T]:
        ...
