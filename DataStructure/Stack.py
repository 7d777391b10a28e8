import logging
import reprlib
from typing import Generic, Iterable, Iterator, List, Optional, TypeVar, Union

logger = logging.getLogger(__name__)

T = TypeVar("T")
D = TypeVar("D")


class Stack(Generic[T]):
    """
    Pila (LIFO) genérica respaldada por una lista de Python.
    El final de la lista es el tope; el índice 0 es el fondo.

    Complejidad: O(1) push/pop/peek (amortizado), O(n) copia/clonado/str
    """

    def __init__(self, elements: Optional[Iterable[T]] = None):
        if elements is None:
            self._items: List[T] = []
            return

        try:
            iterator = iter(elements)
        except TypeError:
            logger.debug("Stack rechazó fuente no iterable: %r", elements)
            raise TypeError(
                f"Stack requiere un iterable, se recibió {type(elements).__name__}"
            ) from None

        # Copia: la pila no conserva referencia a la fuente
        self._items = list(iterator)

    @classmethod
    def from_iterable(cls, elements: Iterable[T]) -> "Stack[T]":
        """Crea una pila a partir de cualquier iterable (fondo a tope)"""
        return cls(elements)

    def push(self, item: T) -> "Stack[T]":
        """Agrega item al tope de la pila. Retorna la pila para encadenar"""
        self._items.append(item)
        return self

    def pop(self, default: Optional[D] = None) -> Union[T, D, None]:
        """
        Extrae y retorna el item del tope.
        Si la pila está vacía retorna `default` sin modificarla.
        """
        if self.is_empty():
            return default
        return self._items.pop()

    def peek(self, default: Optional[D] = None) -> Union[T, D, None]:
        """Retorna el item del tope sin extraerlo (`default` si está vacía)"""
        if self.is_empty():
            return default
        return self._items[-1]

    def is_empty(self) -> bool:
        """Verifica si la pila está vacía"""
        return len(self._items) == 0

    def size(self) -> int:
        """Retorna el tamaño de la pila"""
        return len(self._items)

    @property
    def length(self) -> int:
        """Alias de solo lectura de size()"""
        return len(self._items)

    def to_list(self) -> List[T]:
        """Copia del contenido, de fondo a tope"""
        return self._items.copy()

    def clear(self):
        """Limpia la pila"""
        self._items.clear()

    def clone(self) -> "Stack[T]":
        """Copia superficial e independiente de la pila"""
        # Sin pasar por __init__: las subclases pueden tener otra firma
        new = type(self).__new__(type(self))
        new.__dict__.update(self.__dict__)
        new._items = self._items.copy()
        return new

    def __copy__(self) -> "Stack[T]":
        return self.clone()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        # Cada pasada recorre una instantánea tomada al empezar
        return iter(tuple(self._items))

    @reprlib.recursive_repr()
    def __str__(self) -> str:
        contents = ", ".join(str(item) for item in self._items)
        return f"Stack({len(self._items)}) [{contents}]"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"
