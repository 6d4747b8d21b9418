import logging
import threading
import tkinter as tk

import pystray
from PIL import Image, ImageTk
from pystray import MenuItem as item

from snowing import config
from snowing.field import CullMode, ParticleField
from snowing.random_source import RandomSource
from snowing.sprite import SpriteCache, tray_icon_image

logger = logging.getLogger(__name__)


def enable_click_through(root):
    """마우스 클릭 통과 (Windows API). 다른 OS에서는 아무것도 하지 않는다."""
    try:
        import ctypes
        GWL_EXSTYLE = -20
        WS_EX_LAYERED = 0x00080000
        WS_EX_TRANSPARENT = 0x00000020
        user32 = ctypes.windll.user32
        hwnd = user32.GetParent(root.winfo_id())
        style = user32.GetWindowLongW(hwnd, GWL_EXSTYLE)
        user32.SetWindowLongW(hwnd, GWL_EXSTYLE, style | WS_EX_LAYERED | WS_EX_TRANSPARENT)
    except AttributeError:
        logger.debug("click-through is only available on Windows")
        return False
    except OSError as exc:
        logger.warning("could not make the overlay click-through: %s", exc)
        return False
    return True


class Snowfall:
    def __init__(self, theme=config.DEFAULT_THEME, cull_mode=CullMode.VELOCITY,
                 interval=config.TICK_INTERVAL_MS, seed=None, tray=True):
        if interval <= 0:
            raise ValueError(f"tick interval must be positive, got {interval}")
        self.interval = interval
        self.tray = tray
        self.icon = None
        self.frame = None
        self.after_id = None

        self.sprites = SpriteCache(theme)
        self.field = ParticleField(RandomSource(seed), self.sprites, cull_mode)

        self.root = tk.Tk()
        self.root.title("Snowing")

        self.screen_width = self.root.winfo_screenwidth()
        self.screen_height = self.root.winfo_screenheight()

        self.root.overrideredirect(True)
        self.root.attributes("-topmost", True)
        # 검정 배경은 투명 처리 (Windows 전용 속성)
        try:
            self.root.attributes("-transparentcolor", "black")
        except tk.TclError:
            logger.debug("-transparentcolor is not supported here")
        self.root.geometry(f"{self.screen_width}x{self.screen_height}+0+0")
        enable_click_through(self.root)

        self.canvas = tk.Canvas(self.root, width=self.screen_width, height=self.screen_height,
                                bg='black', highlightthickness=0)
        self.canvas.pack()
        self.image_id = self.canvas.create_image(0, 0, anchor="nw")

        self.root.bind("<Escape>", lambda e: self.quit_window())
        logger.info("snowing on %dx%d every %dms", self.screen_width, self.screen_height, interval)

    def run(self):
        self.animate()
        if self.tray:
            self.tray_thread = threading.Thread(target=self.setup_tray, daemon=True)
            self.tray_thread.start()
        self.root.mainloop()

    def draw_frame(self):
        # 검정(투명색 키) 바탕에 바로 그린다
        surface = Image.new("RGBA", (self.screen_width, self.screen_height), (0, 0, 0, 255))
        self.field.render(surface)
        return surface.convert("RGB")

    def animate(self):
        self.field.update(self.screen_width, self.screen_height)
        # PhotoImage는 참조가 사라지면 지워지므로 self.frame에 보관
        self.frame = ImageTk.PhotoImage(self.draw_frame())
        self.canvas.itemconfigure(self.image_id, image=self.frame)
        self.after_id = self.root.after(self.interval, self.animate)

    def setup_tray(self):
        menu = (item('종료(Exit)', self.on_tray_exit, default=True),)
        self.icon = pystray.Icon("Snowfall", tray_icon_image(self.sprites), "Snowing", menu)
        self.icon.run()

    def on_tray_exit(self, icon, menu_item):
        # 트레이 스레드에서 호출되므로 Tk 쪽 종료는 메인 루프에 맡긴다
        self.root.after(0, self.quit_window)

    def quit_window(self):
        logger.info("stopping with %d snowflakes alive", len(self.field))
        if self.icon is not None:
            # 아이콘을 숨기지 않으면 유령 아이콘이 남는 경우가 있다
            self.icon.visible = False
            self.icon.stop()
        if self.after_id is not None:
            self.root.after_cancel(self.after_id)
        self.root.destroy()
