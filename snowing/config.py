# 눈 내리는 효과의 고정 상수 모음

TICK_INTERVAL_MS = 20  # 약 50Hz

# 생성 조건: 3틱마다 70% 확률
SPAWN_PERIOD = 3
SPAWN_CHANCE = 0.70
SPAWN_MARGIN_X = 50
SPAWN_Y_RANGE = (-20, -7)

ROTATION_RANGE = (0, 359)
ROTATION_STEPS = (-3, 3)
ROTATION_FALLBACK = 3  # 회전이 0이면 이 값으로 대체

SCALE_BASE = 0.75
WIND_JITTER = 0.7
MAX_X_VELOCITY = 2.0
CULL_MARGIN = 10

SPRITE_SIZE = 32
SUPERSAMPLE = 4
OUTLINE_WIDTH = 3
HIGHLIGHT_WIDTH = 2

# 배경(검정)이 투명색 키라서 완전한 검정 대신 (1, 1, 1)을 쓴다
WHITE = (255, 255, 255)
THEMES = {
    "blue": (1, 1, 255),
    "black": (1, 1, 1),
}
DEFAULT_THEME = "blue"


def get_theme(name):
    """테마 이름 -> (외곽선 색, 하이라이트 색)"""
    try:
        return THEMES[name], WHITE
    except KeyError:
        raise ValueError(f"unknown theme {name!r}, expected one of {sorted(THEMES)}") from None
