import enum
import logging
import math
from dataclasses import dataclass

from snowing import config
from snowing.random_source import RandomSource
from snowing.sprite import SpriteCache
from snowing.transform import Affine, blit

logger = logging.getLogger(__name__)


class CullMode(enum.Enum):
    # VELOCITY: 원래 프로그램처럼 세로 *속도*를 화면 높이와 비교한다.
    # vy는 [1, 4) 범위라 사실상 지워지지 않는다. POSITION은 세로 위치로 비교.
    VELOCITY = "velocity"
    POSITION = "position"


@dataclass
class Particle:
    x: float
    y: float
    vx: float
    vy: float
    rotation: float
    rotation_velocity: float
    scale: float

    def transform(self):
        """스프라이트 좌표 -> 화면 좌표"""
        half = config.SPRITE_SIZE / 2
        return (
            Affine()
            .translate(-half, -half)
            .scale(self.scale)
            .rotate(self.rotation)
            .translate(self.x, self.y)
        )

    def off_surface(self, width, height):
        # 회전해도 스프라이트가 들어가는 원의 반지름
        reach = config.SPRITE_SIZE / 2 * self.scale * math.sqrt(2)
        return (
            self.y - reach > height
            or self.y + reach < 0
            or self.x - reach > width
            or self.x + reach < 0
        )


class ParticleField:
    """살아있는 눈송이들을 생성, 이동, 제거하고 그린다"""

    def __init__(self, rng=None, sprites=None, cull_mode=CullMode.VELOCITY):
        self.rng = rng if rng is not None else RandomSource()
        self.sprites = sprites if sprites is not None else SpriteCache()
        self.cull_mode = CullMode(cull_mode)
        self.particles = []
        self.tick = 0

    def __len__(self):
        return len(self.particles)

    def spawn(self, width):
        rng = self.rng
        x = rng.next_int(-config.SPAWN_MARGIN_X, width + config.SPAWN_MARGIN_X)
        y = rng.next_int(*config.SPAWN_Y_RANGE)
        vx = (rng.next_float() - 0.5) * 2
        vy = rng.next_float() * 3 + 1
        rotation = rng.next_int(*config.ROTATION_RANGE)
        rotation_velocity = rng.next_int(*config.ROTATION_STEPS) * 2
        if rotation_velocity == 0:
            rotation_velocity = config.ROTATION_FALLBACK
        scale = rng.next_float() / 2 + config.SCALE_BASE

        return Particle(x, y, vx, vy, rotation, rotation_velocity, scale)

    def should_cull(self, particle, height):
        limit = height + config.CULL_MARGIN
        if self.cull_mode is CullMode.POSITION:
            return particle.y > limit
        return particle.vy > limit

    def step(self, particle):
        particle.x += particle.vx
        particle.y += particle.vy
        particle.rotation += particle.rotation_velocity

        # 바람에 흔들리는 듯한 좌우 움직임
        vx = particle.vx + (self.rng.next_float() - 0.5) * config.WIND_JITTER
        particle.vx = min(max(vx, -config.MAX_X_VELOCITY), config.MAX_X_VELOCITY)

    def update(self, width, height):
        """한 틱 진행. 새로 생긴 눈송이를 돌려준다 (없으면 None)."""
        if width <= 0 or height <= 0:
            logger.debug("skipping tick on %sx%s surface", width, height)
            return None

        self.tick += 1

        spawned = None
        if self.tick % config.SPAWN_PERIOD == 0 and self.rng.next_float() < config.SPAWN_CHANCE:
            spawned = self.spawn(width)
            self.particles.append(spawned)

        # 순회 중에는 표시만 하고, 제거는 끝난 뒤에 한꺼번에
        gone = set()
        for i, particle in enumerate(self.particles):
            self.step(particle)
            if self.should_cull(particle, height):
                gone.add(i)

        if gone:
            self.particles = [p for i, p in enumerate(self.particles) if i not in gone]
            logger.debug("culled %d snowflakes, %d left", len(gone), len(self.particles))

        return spawned

    def render(self, surface):
        sprite = self.sprites.get()
        drawn = 0
        for particle in self.particles:
            if particle.off_surface(surface.width, surface.height):
                continue
            if blit(surface, sprite, particle.transform()):
                drawn += 1
        return drawn
