import sys
import os
# Add the project root to Python path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import numpy as np
import sympy as sp
from symcalc import (
  var, const, sin, cos, exp, ln, log, PI, LogLevel, configure_logging, config_context,
  evaluate, derivative, simplify, substitute, display, all_variables, to_sympy
)

def projectile_height():
  """Height of a projectile launched at speed v and angle theta"""
  t = var('t')
  v = var('v')
  theta = var('theta')
  g = const('g', 9.81)
  return (t, v, theta), v * sin(theta) * t - g * t ** 2 / 2

def damped_oscillator():
  """x(t) = exp(-t/4) * cos(2 pi t)"""
  t = var('t')
  return t, exp(-t / 4) * cos(2 * PI * t)

def show_calculus(name, variable, expr, points):
  print(f"\n{'='*60}")
  print(f"{name}")
  print(f"{'='*60}")
  print(f"f         = {display(expr)}")
  print(f"variables = {[v.name for v in all_variables(expr)]}")

  first = derivative(expr, variable=variable)
  second = derivative(expr, order=2, variable=variable)
  print(f"df        = {display(first)}")
  print(f"d2f       = {display(second)}")
  print(f"SymPy     = {sp.simplify(to_sympy(first))}")

  print("\nSamples:")
  for point, f_val, d_val in zip(points['t'], evaluate(expr, points), evaluate(first, points)):
    print(f"  t={point:6.3f}  f={f_val:10.5f}  df={d_val:10.5f}")

def main():
  configure_logging(LogLevel.MINIMAL)

  (t, v, theta), height = projectile_height()
  # Variables compare by identity, so substitute the objects held in the tree
  h = substitute(substitute(height, v, 20), theta, PI / 6)
  times = np.linspace(0.0, 2.0, 5)
  show_calculus("Projectile height", t, h, {'t': times})

  t, x = damped_oscillator()
  show_calculus("Damped oscillator", t, x, {'t': np.linspace(0.0, 1.0, 5)})

  # Expressions built without auto-simplification keep every node
  u = var('u')
  with config_context(auto_simplify=False):
    raw = (u + 0) * 1 + ln(exp(u)) * log(10, u)
  print(f"\nRaw:        {display(raw)} ({raw.size()} nodes)")
  tidy = simplify(raw)
  print(f"Simplified: {display(tidy)} ({tidy.size()} nodes)")

if __name__ == "__main__":
  main()
