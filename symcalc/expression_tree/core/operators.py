import numpy as np
import numba
from enum import IntEnum

class NodeType(IntEnum):
  # Leaves
  NUMERIC_LITERAL = 0
  NAMED_CONSTANT = 1
  VARIABLE = 2
  # N-ary ops
  SUM = 3
  PRODUCT = 4
  # Binary ops
  QUOTIENT = 5
  POWER = 6
  LOGARITHM = 7
  # Unary ops
  NEGATE = 8
  EXPONENTIAL = 9
  SINE = 10
  COSINE = 11
  NATURAL_LOG = 12
  ABSOLUTE_VALUE = 13

# error_model='numpy': x/0 gives inf/nan instead of ZeroDivisionError

def evaluate_variable(values, name):
  return np.asarray(values[name], dtype=np.float64)

@numba.njit(cache=True)
def evaluate_constant(n_samples, value):
  return np.full(n_samples, value, dtype=np.float64)

@numba.njit(cache=True, error_model='numpy')
def evaluate_binary_op(left_val, right_val, operator):
  if operator == '+':
    return left_val + right_val
  elif operator == '*':
    return left_val * right_val
  elif operator == '/':
    return left_val / right_val
  elif operator == '^':
    return np.power(left_val, right_val)
  elif operator == 'log':
    # left is the base, right the operand
    return np.log(right_val) / np.log(left_val)
  return np.zeros_like(left_val)

@numba.njit(cache=True, error_model='numpy')
def evaluate_unary_op(operand_val, operator):
  if operator == 'neg':
    return -operand_val
  elif operator == 'exp':
    return np.exp(operand_val)
  elif operator == 'sin':
    return np.sin(operand_val)
  elif operator == 'cos':
    return np.cos(operand_val)
  elif operator == 'ln':
    return np.log(operand_val)
  elif operator == 'abs':
    return np.abs(operand_val)
  return np.zeros_like(operand_val)
