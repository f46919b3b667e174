from math import sin, cos, pi, sqrt
from collections import namedtuple


class Transform(namedtuple('Transform', 'xx yx xy yy x0 y0')):
  """Affine transform using cairo's matrix layout:
  x' = xx*x + xy*y + x0
  y' = yx*x + yy*y + y0
  translate/scale/rotate act on user space first, just like cairo's context."""
  __slots__ = ()

  @classmethod
  def identity(cls):
    return cls(1.0, 0.0, 0.0, 1.0, 0.0, 0.0)

  def multiply(self, other):
    """Returns the transform that applies other first, then self"""
    return Transform(
      self.xx*other.xx + self.xy*other.yx,
      self.yx*other.xx + self.yy*other.yx,
      self.xx*other.xy + self.xy*other.yy,
      self.yx*other.xy + self.yy*other.yy,
      self.xx*other.x0 + self.xy*other.y0 + self.x0,
      self.yx*other.x0 + self.yy*other.y0 + self.y0 )

  def translate(self, tx, ty):
    return self.multiply(Transform(1.0, 0.0, 0.0, 1.0, tx, ty))

  def scale(self, sx, sy):
    return self.multiply(Transform(sx, 0.0, 0.0, sy, 0.0, 0.0))

  def rotate(self, angle):
    c, s = cos(angle), sin(angle)
    return self.multiply(Transform(c, s, -s, c, 0.0, 0.0))

  def apply(self, x, y):
    return (self.xx*x + self.xy*y + self.x0, self.yx*x + self.yy*y + self.y0)

  def unit_length(self):
    """Pixel length of one user space unit. Only meaningful for uniform scales, which is all the clock uses"""
    return sqrt(abs(self.xx*self.yy - self.xy*self.yx))


def clock_box(width, height):
  """The largest square that fits the window, centred. Returns (left, top, size)"""
  boxsize = min(width, height)
  return ((width - boxsize) / 2.0, (height - boxsize) / 2.0, boxsize)

def clock_transform(width, height):
  """Maps clock space (-1.0..1.0, rotation 0 at 12:00 growing clockwise) onto the window"""
  left, top, boxsize = clock_box(width, height)
  t = Transform.identity().translate(left, top)  # Centre the clock box in the window
  t = t.scale(boxsize / 2.0, boxsize / 2.0)  # -1.0 .. 1.0 spans the whole box
  t = t.translate(1.0, 1.0)  # Origin to the middle of the box
  # Y grows down, so rotating back a quarter turn puts 0 at the top and keeps angles clockwise
  return t.rotate(-pi / 2.0)
