import math

from PIL import Image


class Affine:
    """2x3 아핀 행렬. x' = a*x + b*y + c, y' = d*x + e*y + f

    translate/scale/rotate는 지금까지의 변환 *뒤에* 적용되는 새 행렬을
    돌려준다. 즉 호출 순서가 곧 적용 순서다.
    """

    __slots__ = ("a", "b", "c", "d", "e", "f")

    def __init__(self, a=1.0, b=0.0, c=0.0, d=0.0, e=1.0, f=0.0):
        self.a, self.b, self.c = a, b, c
        self.d, self.e, self.f = d, e, f

    def __repr__(self):
        return "Affine(%g, %g, %g, %g, %g, %g)" % self.coefficients()

    def coefficients(self):
        return (self.a, self.b, self.c, self.d, self.e, self.f)

    def then(self, other):
        """self를 먼저, other를 나중에 적용하는 행렬"""
        return Affine(
            other.a * self.a + other.b * self.d,
            other.a * self.b + other.b * self.e,
            other.a * self.c + other.b * self.f + other.c,
            other.d * self.a + other.e * self.d,
            other.d * self.b + other.e * self.e,
            other.d * self.c + other.e * self.f + other.f,
        )

    def translate(self, tx, ty):
        return self.then(Affine(c=tx, f=ty))

    def scale(self, s):
        return self.then(Affine(a=s, e=s))

    def rotate(self, degrees):
        # y축이 아래로 향하는 화면에서는 양수 각도가 시계 방향
        rad = math.radians(degrees)
        cos, sin = math.cos(rad), math.sin(rad)
        return self.then(Affine(cos, -sin, 0.0, sin, cos, 0.0))

    def apply(self, x, y):
        return (self.a * x + self.b * y + self.c, self.d * x + self.e * y + self.f)

    def inverse(self):
        det = self.a * self.e - self.b * self.d
        if det == 0:
            raise ValueError("affine transform is not invertible")
        a, b = self.e / det, -self.b / det
        d, e = -self.d / det, self.a / det
        return Affine(a, b, -(a * self.c + b * self.f), d, e, -(d * self.c + e * self.f))


def blit(surface, image, matrix):
    """image를 matrix로 변환해 surface(RGBA)에 합성한다. 화면 밖은 잘라낸다."""
    w, h = image.size
    corners = [matrix.apply(x, y) for x, y in ((0, 0), (w, 0), (0, h), (w, h))]
    xs = [p[0] for p in corners]
    ys = [p[1] for p in corners]

    x0 = max(0, math.floor(min(xs)))
    y0 = max(0, math.floor(min(ys)))
    x1 = min(surface.width, math.ceil(max(xs)))
    y1 = min(surface.height, math.ceil(max(ys)))
    if x0 >= x1 or y0 >= y1:
        return False

    # 조각 이미지의 (0, 0)은 surface의 (x0, y0)
    back = Affine().translate(x0, y0).then(matrix.inverse())
    patch = image.transform((x1 - x0, y1 - y0), Image.AFFINE, back.coefficients(), resample=Image.NEAREST)
    surface.alpha_composite(patch, dest=(x0, y0))
    return True
