# frontend/screens/product.py
import customtkinter as ctk

from frontend import config as cfg
from frontend.assets import assets
from src.core.models import Product
from src.navigation import carousel
from src.navigation.carousel import CarouselState

VIEWER_SIZE = (760, 480)
FULLSCREEN_SIZE = (1200, 720)


class ProductScreen(ctk.CTkFrame):
    """Media carousel for one product, with its caption and description."""

    def __init__(self, parent, product: Product, on_back, on_chat=None):
        super().__init__(parent, fg_color=cfg.BG_COLOR)
        self.product = product
        self.on_back = on_back
        self.on_chat = on_chat
        self.carousel = carousel.set_media(CarouselState(), product.media)

        self.grid_rowconfigure(1, weight=1)
        self.grid_columnconfigure(0, weight=3)
        self.grid_columnconfigure(1, weight=2)

        self._build_ui()
        self._render()

    def _build_ui(self):
        header = ctk.CTkFrame(self, fg_color="transparent")
        header.grid(row=0, column=0, columnspan=2, sticky="ew", padx=20, pady=15)

        ctk.CTkButton(
            header, text="Back", width=90, height=40, corner_radius=20,
            font=(cfg.FONT_FAMILY, 15),
            fg_color=cfg.CARD_BG, text_color=cfg.TEXT_COLOR_DARK,
            border_width=1, border_color=cfg.BORDER_COLOR, hover_color=cfg.BORDER_COLOR,
            command=self.on_back,
        ).pack(side="left")
        ctk.CTkLabel(header, text=self.product.name, font=(cfg.FONT_FAMILY, 24, "bold"),
                     text_color=cfg.TEXT_COLOR_DARK).pack(side="left", padx=20)
        if self.on_chat:
            ctk.CTkButton(
                header, text="Ask about this product", height=40, corner_radius=20,
                font=(cfg.FONT_FAMILY, 15, "bold"), fg_color=cfg.ACCENT,
                command=lambda: self.on_chat(self.product),
            ).pack(side="right")

        # --- viewer ---
        viewer = ctk.CTkFrame(self, fg_color=cfg.CARD_BG, corner_radius=20)
        viewer.grid(row=1, column=0, sticky="nsew", padx=(20, 10), pady=(0, 20))
        viewer.grid_rowconfigure(0, weight=1)
        viewer.grid_columnconfigure(0, weight=1)

        self.media_label = ctk.CTkLabel(viewer, text="", font=(cfg.FONT_FAMILY, 18),
                                        text_color=cfg.MUTED)
        self.media_label.grid(row=0, column=0, sticky="nsew", padx=10, pady=10)
        self.media_label.bind("<Double-Button-1>", lambda e: self._update(carousel.toggle_fullscreen))

        self.caption_label = ctk.CTkLabel(viewer, text="", font=(cfg.FONT_FAMILY, 15),
                                          text_color=cfg.TEXT_COLOR_LIGHT, wraplength=700)
        self.caption_label.grid(row=1, column=0, pady=(0, 5))

        controls = ctk.CTkFrame(viewer, fg_color="transparent")
        controls.grid(row=2, column=0, pady=(0, 15))
        self.btn_prev = ctk.CTkButton(controls, text="‹", width=50, height=40,
                                      fg_color=cfg.PRIMARY, hover_color=cfg.PRIMARY_HOVER,
                                      command=lambda: self._update(carousel.previous_slide))
        self.btn_prev.pack(side="left", padx=10)
        self.position_label = ctk.CTkLabel(controls, text="", font=(cfg.FONT_FAMILY, 14),
                                           text_color=cfg.MUTED)
        self.position_label.pack(side="left", padx=10)
        self.btn_next = ctk.CTkButton(controls, text="›", width=50, height=40,
                                      fg_color=cfg.PRIMARY, hover_color=cfg.PRIMARY_HOVER,
                                      command=lambda: self._update(carousel.next_slide))
        self.btn_next.pack(side="left", padx=10)

        # --- details ---
        details = ctk.CTkScrollableFrame(self, fg_color=cfg.CARD_BG, corner_radius=20)
        details.grid(row=1, column=1, sticky="nsew", padx=(10, 20), pady=(0, 20))
        ctk.CTkLabel(
            details,
            text=self.product.description or "No description available.",
            font=(cfg.FONT_FAMILY, 15), text_color=cfg.TEXT_COLOR_DARK,
            justify="left", wraplength=420,
        ).pack(anchor="w", padx=15, pady=15)

    def _update(self, reducer, *args):
        self.carousel = reducer(self.carousel, *args)
        self._render()

    def _render(self):
        state = self.carousel
        current = state.current
        if current is None:
            self.media_label.configure(image=None, text="No media for this product.")
            self.caption_label.configure(text="")
            self.position_label.configure(text="")
            self.btn_prev.configure(state="disabled")
            self.btn_next.configure(state="disabled")
            return

        if current.type == "image":
            size = FULLSCREEN_SIZE if state.is_fullscreen else VIEWER_SIZE
            image = assets.image(current.path, size, fit=True)
            self.media_label.configure(image=image, text="" if image else current.filename)
        else:
            # Video playback is left to the system player
            self.media_label.configure(image=None, text=f"▶  {current.filename}")

        self.caption_label.configure(text=current.caption or "")
        self.position_label.configure(text=f"{state.current_index + 1} / {len(state.media)}")
        self.btn_prev.configure(state="normal" if state.current_index > 0 else "disabled")
        self.btn_next.configure(
            state="normal" if state.current_index < len(state.media) - 1 else "disabled"
        )
