import logging
import threading

from PIL import Image, ImageDraw

from snowing import config

logger = logging.getLogger(__name__)


def draw_snowflake(draw, origin, fill, width, unit=1):
    """origin을 중심으로 눈송이 모양(X자 + 십자 + 가운데 점)을 그린다"""
    a = 6
    a2 = a + 2
    r = 2
    cx, cy = origin

    def pt(x, y):
        return (cx + x * unit, cy + y * unit)

    draw.line([pt(-a, -a), pt(a, a)], fill=fill, width=width * unit)
    draw.line([pt(-a, a), pt(a, -a)], fill=fill, width=width * unit)

    draw.line([pt(-a2, 0), pt(a2, 0)], fill=fill, width=width * unit)
    draw.line([pt(0, -a2), pt(0, a2)], fill=fill, width=width * unit)

    draw.ellipse([pt(-r, -r), pt(r, r)], fill=fill)


def build_snowflake_image(theme=config.DEFAULT_THEME):
    outline, highlight = config.get_theme(theme)
    size = config.SPRITE_SIZE
    k = config.SUPERSAMPLE

    # 크게 그린 뒤 줄여서 안티앨리어싱 효과를 낸다 (한 번만 실행되므로 품질 우선)
    big = Image.new("RGBA", (size * k, size * k), (0, 0, 0, 0))
    dc = ImageDraw.Draw(big)
    center = (size * k // 2, size * k // 2)
    draw_snowflake(dc, center, outline + (255,), config.OUTLINE_WIDTH, unit=k)
    draw_snowflake(dc, center, highlight + (255,), config.HIGHLIGHT_WIDTH, unit=k)

    return big.resize((size, size), Image.LANCZOS)


class SpriteCache:
    """모든 눈송이가 같이 쓰는 32x32 이미지. 처음 요청할 때 한 번만 만든다."""

    def __init__(self, theme=config.DEFAULT_THEME):
        config.get_theme(theme)
        self.theme = theme
        self._image = None
        self._lock = threading.Lock()

    def get(self):
        if self._image is None:
            with self._lock:
                if self._image is None:
                    self._image = build_snowflake_image(self.theme)
                    logger.debug("built %s snowflake sprite %s", self.theme, self._image.size)
        return self._image

    def invalidate(self):
        with self._lock:
            self._image = None


def tray_icon_image(sprites, size=64):
    # 트레이 아이콘은 눈송이 스프라이트를 키워서 사용
    return sprites.get().resize((size, size), Image.LANCZOS)
