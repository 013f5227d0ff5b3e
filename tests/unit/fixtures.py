"""
Test fixtures and bean factories for unit tests.

Provides:
- Bean classes exercising the accessor naming rules
- Factories for populated beans and property maps
"""

import abc
import functools
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Union

if TYPE_CHECKING:
    from decimal import Decimal


# ============================================================================
# BEAN CLASSES
# ============================================================================

class DemoBean:
    """The classic id/name bean with a derived flag and a naming trap."""

    def __init__(self):
        self.id = None
        self.name = None

    def getId(self) -> Optional[int]:
        return self.id

    def setId(self, id: Optional[int]):
        self.id = id

    def getName(self) -> Optional[str]:
        return self.name

    def setName(self, name: Optional[str]):
        self.name = name

    def isLongName(self) -> bool:
        return self.name is not None and len(self.name) > 10

    def isolate(self) -> int:
        # lower-case after "is": not a property
        return 0

    def __repr__(self):
        return f"DemoBean{{id={self.id}, name={self.name!r}, longName={self.isLongName()}}}"


class ChildBean(DemoBean):
    """Inherits DemoBean's accessors, overrides one and adds another."""

    def __init__(self):
        super().__init__()
        self.email = None

    def getName(self) -> Optional[str]:
        return self.name.upper() if self.name else self.name

    def getEmail(self) -> Optional[str]:
        return self.email

    def setEmail(self, email: str):
        self.email = email


class UntypedBean:
    """Setters without annotations; ``count`` is declared on the class."""
    count: int

    def __init__(self):
        self.count = 0
        self.label = 'default'

    def getCount(self):
        return self.count

    def setCount(self, count):
        self.count = count

    def getLabel(self):
        return self.label

    def setLabel(self, label):
        self.label = label


class TypedBean:
    """Setters covering the supported annotation shapes."""

    def __init__(self):
        self.ratio = 0.0
        self.tags = []
        self.key = None
        self.payload = None

    def getRatio(self) -> float:
        return self.ratio

    def setRatio(self, ratio: float):
        self.ratio = ratio

    def getTags(self) -> List[str]:
        return self.tags

    def setTags(self, tags: List[str]):
        self.tags = tags

    def getKey(self) -> Union[int, str, None]:
        return self.key

    def setKey(self, key: Union[int, str]):
        self.key = key

    def getPayload(self) -> Any:
        return self.payload

    def setPayload(self, payload: Any):
        self.payload = payload


def _logged(func):
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        return func(*args, **kwargs)
    return wrapper


class TrickyBean:
    """Methods that look like accessors but must not be treated as such."""
    CONSTANT = 'getNotAMethod'

    def __init__(self):
        self.value = 1

    def getValue(self):
        return self.value

    def getValueAt(self, index):
        return self.value + index

    def getWithDefault(self, fallback=None):
        return fallback

    def getter(self):
        return 'lower-case remainder'

    def get_value(self):
        return 'snake case'

    @_logged
    def getWrapped(self):
        return 'wrapped'

    @staticmethod
    def getStatic():
        return 'static'

    @classmethod
    def getKind(cls):
        return cls.__name__

    @property
    def getProperty(self):
        return 'property'

    def setValue(self, first, second):
        self.value = (first, second)

    def setOnly(self, *, value):
        self.value = value


class CollidingBean:
    """Two accessors deriving the same property name."""

    def getFlag(self):
        return 'from get'

    def isFlag(self):
        return True


class FailingGetterBean:
    """A getter that raises."""

    def getBroken(self):
        raise RuntimeError("getter exploded")


class FailingSetterBean:
    """A setter that rejects every value."""

    def getValue(self):
        return None

    def setValue(self, value):
        raise ValueError(f"refusing {value!r}")


class TransformingBean(DemoBean):
    """A setter that does not store what it was given."""

    def setName(self, name: Optional[str]):
        self.name = name.strip() if name else name


class RequiredArgBean:
    """No zero-argument constructor."""

    def __init__(self, identifier):
        self.identifier = identifier

    def getIdentifier(self):
        return self.identifier


class ExplodingConstructorBean:
    """Constructor raises."""

    def __init__(self):
        raise RuntimeError("constructor exploded")


class AbstractBean(abc.ABC):
    """Cannot be instantiated."""

    @abc.abstractmethod
    def getName(self):
        ...


class UnresolvableAnnotationBean:
    """Return annotation refers to a name that does not exist."""

    def getThing(self) -> 'MissingType':  # noqa: F821
        return None


class FieldNamedBean:
    """``name`` is declared on the class as a plain str."""
    name: str

    def __init__(self):
        self.name = 'default'

    def getName(self):
        return self.name

    def setName(self, name):
        self.name = name


class PricedBean:
    """``Decimal`` is only imported for type checkers."""

    def __init__(self):
        self.id = 0
        self.amount = None

    def getId(self) -> int:
        return self.id

    def setId(self, id: int):
        self.id = id

    def getAmount(self) -> 'Decimal':
        return self.amount

    def setAmount(self, amount: 'Decimal'):
        self.amount = amount


BareAccessorBean = type('BareAccessorBean', (), {
    'get': lambda self: 'bare get',
    'is': lambda self: True,
    'getX': lambda self: 'x',
})


# ============================================================================
# BEAN FACTORIES
# ============================================================================

class BeanFixtures:
    """Factory for populated beans and property maps."""

    @staticmethod
    def create_demo_bean(id: Optional[int] = 100,
                         name: Optional[str] = 'BBBBBBBBBBBBB') -> DemoBean:
        """Create a DemoBean populated through its setters."""
        bean = DemoBean()
        bean.setId(id)
        bean.setName(name)
        return bean

    @staticmethod
    def create_child_bean(id: int = 7, name: str = 'child',
                          email: str = 'child@example.com') -> ChildBean:
        """Create a ChildBean populated through its setters."""
        bean = ChildBean()
        bean.setId(id)
        bean.setName(name)
        bean.setEmail(email)
        return bean

    @staticmethod
    def create_demo_map(id: Any = 456, name: Any = '12345', **extra: Any) -> Dict[str, Any]:
        """Create a property map for DemoBean, with optional extra keys."""
        data = {'id': id, 'name': name}
        data.update(extra)
        return data


# ============================================================================
# CONFIGURATION FIXTURES
# ============================================================================

class ConfigFixtures:
    """YAML documents for configuration loading."""

    NESTED_YAML = """
beanmap:
  strict: true
  cache: false
  getter_prefixes:
    - get
    - is
    - has
"""

    FLAT_YAML = """
strict: false
setter_prefix: put
"""

    UNKNOWN_KEY_YAML = """
strict: true
colour: blue
"""
