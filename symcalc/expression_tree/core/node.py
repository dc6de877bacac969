import math
import numbers
import numpy as np
import sympy as sp
from abc import ABC, abstractmethod
from typing import Optional, Dict, List, Sequence, Union
from .operators import (
  NodeType,
  evaluate_variable, evaluate_constant, evaluate_binary_op, evaluate_unary_op
)
from ...errors import UnboundVariableError


Number = Union[int, float]


def to_expression(value) -> 'Expression':
  """Lift a raw number to a NumericLiteral, pass expressions through"""
  if isinstance(value, Expression):
    return value
  if isinstance(value, numbers.Real):
    return NumericLiteral(value)
  raise TypeError(f"Cannot use {type(value).__name__} as an expression")


def _is_liftable(value) -> bool:
  return isinstance(value, (Expression, numbers.Real))


def _as_float(value) -> float:
  """float(value), saturating integers beyond float range to +-inf"""
  try:
    return float(value)
  except OverflowError:
    return math.inf if value > 0 else -math.inf


class Expression(ABC):
  """Base node of the expression tree.

  Nodes are immutable once built: simplification, differentiation and
  substitution all return new trees. Operator sugar builds the matching
  composite node and simplifies it when the active configuration asks for it.
  """

  __slots__ = ('_hash_cache', '_size_cache', '__weakref__')

  node_type: NodeType

  def __init__(self):
    self._hash_cache: Optional[int] = None
    self._size_cache: Optional[int] = None

  @abstractmethod
  def evaluate(self, values: Dict[str, np.ndarray], n_samples: int) -> np.ndarray:
    pass

  @abstractmethod
  def to_string(self) -> str:
    pass

  @abstractmethod
  def to_sympy(self) -> sp.Expr:
    pass

  def children(self) -> List['Expression']:
    return []

  def with_children(self, children: Sequence['Expression']) -> 'Expression':
    """Rebuild this node with new children (leaves return themselves)"""
    return self

  def size(self) -> int:
    """Node count"""
    if self._size_cache is None:
      self._size_cache = 1 + sum(child.size() for child in self.children())
    return self._size_cache

  # Equality

  def _equals(self, other) -> bool:
    return self is other

  def _compute_hash(self) -> int:
    return object.__hash__(self)

  def __eq__(self, other) -> bool:
    return self._equals(other)

  def __ne__(self, other) -> bool:
    return not self._equals(other)

  def __hash__(self) -> int:
    if self._hash_cache is None:
      self._hash_cache = self._compute_hash()
    return self._hash_cache

  # Display

  def __str__(self) -> str:
    return self.to_string()

  def __repr__(self) -> str:
    return f"<{type(self).__name__} {self.to_string()}>"

  # Operator sugar

  def _finish(self, node: 'Expression') -> 'Expression':
    from ...config import get_config
    if get_config().auto_simplify:
      from ..utils.simplifier import ExpressionSimplifier
      return ExpressionSimplifier.simplify_expression(node)
    return node

  def __add__(self, other):
    if not _is_liftable(other):
      return NotImplemented
    return self._finish(Sum(self, to_expression(other)))

  def __radd__(self, other):
    if not _is_liftable(other):
      return NotImplemented
    return self._finish(Sum(to_expression(other), self))

  def __sub__(self, other):
    if not _is_liftable(other):
      return NotImplemented
    return self._finish(Sum(self, Negate(to_expression(other))))

  def __rsub__(self, other):
    if not _is_liftable(other):
      return NotImplemented
    return self._finish(Sum(to_expression(other), Negate(self)))

  def __mul__(self, other):
    if not _is_liftable(other):
      return NotImplemented
    return self._finish(Product(self, to_expression(other)))

  def __rmul__(self, other):
    if not _is_liftable(other):
      return NotImplemented
    return self._finish(Product(to_expression(other), self))

  def __truediv__(self, other):
    if not _is_liftable(other):
      return NotImplemented
    return self._finish(Quotient(self, to_expression(other)))

  def __rtruediv__(self, other):
    if not _is_liftable(other):
      return NotImplemented
    return self._finish(Quotient(to_expression(other), self))

  def __pow__(self, other):
    if not _is_liftable(other):
      return NotImplemented
    return self._finish(Power(self, to_expression(other)))

  def __rpow__(self, other):
    if not _is_liftable(other):
      return NotImplemented
    return self._finish(Power(to_expression(other), self))

  def __neg__(self):
    return self._finish(Negate(self))

  def __pos__(self):
    return self

  def __abs__(self):
    return self._finish(AbsoluteValue(self))


class NumericLiteral(Expression):
  __slots__ = ('value',)

  node_type = NodeType.NUMERIC_LITERAL

  def __init__(self, value: Number):
    super().__init__()
    self.value = value

  def evaluate(self, values, n_samples):
    return evaluate_constant(n_samples, _as_float(self.value))

  def to_string(self) -> str:
    return str(self.value)

  def to_sympy(self):
    return sp.sympify(self.value)

  def _equals(self, other) -> bool:
    other_value = _value_of(other)
    return other_value is not None and bool(self.value == other_value)

  def _compute_hash(self) -> int:
    return hash(self.value)


class NamedConstant(Expression):
  """Displays as its name, evaluates as its value"""

  __slots__ = ('name', 'value')

  node_type = NodeType.NAMED_CONSTANT

  def __init__(self, name: str, value: Number):
    super().__init__()
    self.name = name
    self.value = value

  def evaluate(self, values, n_samples):
    return evaluate_constant(n_samples, _as_float(self.value))

  def to_string(self) -> str:
    return self.name

  def to_sympy(self):
    if self.name == 'pi' and self.value == np.pi:
      return sp.pi
    if self.name == 'e' and self.value == np.e:
      return sp.E
    return sp.Float(self.value)

  def _equals(self, other) -> bool:
    other_value = _value_of(other)
    return other_value is not None and bool(self.value == other_value)

  def _compute_hash(self) -> int:
    return hash(self.value)


def _value_of(other) -> Optional[Number]:
  if isinstance(other, (NumericLiteral, NamedConstant)):
    return other.value
  if isinstance(other, numbers.Real):
    return other
  return None


class Variable(Expression):
  __slots__ = ('name',)

  node_type = NodeType.VARIABLE

  def __init__(self, name: str):
    super().__init__()
    self.name = name

  def evaluate(self, values, n_samples):
    if self.name not in values:
      raise UnboundVariableError(self.name)
    return evaluate_variable(values, self.name)

  def to_string(self) -> str:
    return self.name

  def to_sympy(self):
    return sp.Symbol(self.name)


class _NaryNode(Expression):
  """Shared base of Sum and Product: flattens same-type children on construction"""

  __slots__ = ('elements',)

  operator: str
  separator: str

  def __init__(self, *elements):
    super().__init__()
    if len(elements) == 1 and isinstance(elements[0], (list, tuple)):
      elements = tuple(elements[0])
    if not elements:
      raise ValueError(f"{type(self).__name__} needs at least one element")
    flat: List[Expression] = []
    for element in elements:
      element = to_expression(element)
      if type(element) is type(self):
        flat.extend(element.elements)
      else:
        flat.append(element)
    self.elements = tuple(flat)

  def evaluate(self, values, n_samples):
    result = self.elements[0].evaluate(values, n_samples)
    for element in self.elements[1:]:
      result = evaluate_binary_op(result, element.evaluate(values, n_samples), self.operator)
    return result

  def to_string(self) -> str:
    return self.separator.join(f"({element.to_string()})" for element in self.elements)

  def children(self):
    return list(self.elements)

  def with_children(self, children):
    return type(self)(*children)


class Sum(_NaryNode):
  __slots__ = ()

  node_type = NodeType.SUM
  operator = '+'
  separator = ' + '

  def to_sympy(self):
    return sp.Add(*[element.to_sympy() for element in self.elements])


class Product(_NaryNode):
  __slots__ = ()

  node_type = NodeType.PRODUCT
  operator = '*'
  separator = ' * '

  def to_sympy(self):
    return sp.Mul(*[element.to_sympy() for element in self.elements])


class UnaryOpNode(Expression):
  """Single-operand node: negation and the elementary functions"""

  __slots__ = ('operand',)

  operator: str

  def __init__(self, operand):
    super().__init__()
    self.operand = to_expression(operand)

  def evaluate(self, values, n_samples):
    return evaluate_unary_op(self.operand.evaluate(values, n_samples), self.operator)

  def to_string(self) -> str:
    return f"{self.operator}({self.operand.to_string()})"

  def children(self):
    return [self.operand]

  def with_children(self, children):
    return type(self)(children[0])


class Negate(UnaryOpNode):
  __slots__ = ()

  node_type = NodeType.NEGATE
  operator = 'neg'

  def to_string(self) -> str:
    return f"-({self.operand.to_string()})"

  def to_sympy(self):
    return -self.operand.to_sympy()


class Exponential(UnaryOpNode):
  __slots__ = ()

  node_type = NodeType.EXPONENTIAL
  operator = 'exp'

  def to_sympy(self):
    return sp.exp(self.operand.to_sympy())

  def _equals(self, other) -> bool:
    return self is other or (isinstance(other, Exponential) and self.operand == other.operand)

  def _compute_hash(self) -> int:
    return hash((NodeType.EXPONENTIAL, hash(self.operand)))


class Sine(UnaryOpNode):
  __slots__ = ()

  node_type = NodeType.SINE
  operator = 'sin'

  def to_sympy(self):
    return sp.sin(self.operand.to_sympy())


class Cosine(UnaryOpNode):
  __slots__ = ()

  node_type = NodeType.COSINE
  operator = 'cos'

  def to_sympy(self):
    return sp.cos(self.operand.to_sympy())


class NaturalLog(UnaryOpNode):
  __slots__ = ()

  node_type = NodeType.NATURAL_LOG
  operator = 'ln'

  def to_sympy(self):
    return sp.log(self.operand.to_sympy())


class AbsoluteValue(UnaryOpNode):
  __slots__ = ()

  node_type = NodeType.ABSOLUTE_VALUE
  operator = 'abs'

  def to_string(self) -> str:
    return f"|{self.operand.to_string()}|"

  def to_sympy(self):
    return sp.Abs(self.operand.to_sympy())


class BinaryOpNode(Expression):
  """Two-operand node; subclasses name the operands"""

  __slots__ = ('left', 'right')

  operator: str

  def __init__(self, left, right):
    super().__init__()
    self.left = to_expression(left)
    self.right = to_expression(right)

  def evaluate(self, values, n_samples):
    left_val = self.left.evaluate(values, n_samples)
    right_val = self.right.evaluate(values, n_samples)
    return evaluate_binary_op(left_val, right_val, self.operator)

  def children(self):
    return [self.left, self.right]

  def with_children(self, children):
    return type(self)(children[0], children[1])

  def _equals(self, other) -> bool:
    return self is other or (type(other) is type(self) and
                             self.left == other.left and self.right == other.right)


class Quotient(BinaryOpNode):
  __slots__ = ()

  node_type = NodeType.QUOTIENT
  operator = '/'

  @property
  def numerator(self) -> Expression:
    return self.left

  @property
  def denominator(self) -> Expression:
    return self.right

  def to_string(self) -> str:
    return f"({self.left.to_string()}) / ({self.right.to_string()})"

  def to_sympy(self):
    return sp.Mul(self.left.to_sympy(), sp.Pow(self.right.to_sympy(), -1))

  def _compute_hash(self) -> int:
    return hash((NodeType.QUOTIENT, hash(self.left), hash(self.right)))


class Power(BinaryOpNode):
  __slots__ = ()

  node_type = NodeType.POWER
  operator = '^'

  @property
  def base(self) -> Expression:
    return self.left

  @property
  def exponent(self) -> Expression:
    return self.right

  def to_string(self) -> str:
    return f"({self.left.to_string()})^({self.right.to_string()})"

  def to_sympy(self):
    return sp.Pow(self.left.to_sympy(), self.right.to_sympy())

  def _compute_hash(self) -> int:
    return hash((NodeType.POWER, hash(self.left), hash(self.right)))


class Logarithm(BinaryOpNode):
  """Logarithm of `operand` in `base`; children are (base, operand)"""

  __slots__ = ()

  node_type = NodeType.LOGARITHM
  operator = 'log'

  @property
  def base(self) -> Expression:
    return self.left

  @property
  def operand(self) -> Expression:
    return self.right

  def to_string(self) -> str:
    return f"log_({self.left.to_string()})({self.right.to_string()})"

  def to_sympy(self):
    return sp.log(self.right.to_sympy(), self.left.to_sympy())

  # Identity equality, like the other function nodes
  def _equals(self, other) -> bool:
    return self is other
