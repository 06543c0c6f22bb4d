# frontend/screens/session_warning.py
import customtkinter as ctk

from frontend import config as cfg


class SessionWarning(ctk.CTkFrame):
    """'Are you still there?' card with a live countdown."""

    def __init__(self, parent, on_continue, on_reset):
        super().__init__(parent, fg_color=cfg.CARD_BG, corner_radius=24,
                         border_width=1, border_color=cfg.BORDER_COLOR)

        ctk.CTkLabel(self, text="Are you still there?", font=(cfg.FONT_FAMILY, 26, "bold"),
                     text_color=cfg.TEXT_COLOR_DARK).pack(padx=40, pady=(30, 10))
        self.countdown_label = ctk.CTkLabel(self, text="", font=(cfg.FONT_FAMILY, 18),
                                            text_color=cfg.TEXT_COLOR_LIGHT)
        self.countdown_label.pack(padx=40, pady=(0, 20))

        buttons = ctk.CTkFrame(self, fg_color="transparent")
        buttons.pack(pady=(0, 30))
        ctk.CTkButton(buttons, text="Continue", width=160, height=48, corner_radius=24,
                      font=(cfg.FONT_FAMILY, 16, "bold"),
                      fg_color=cfg.PRIMARY, hover_color=cfg.PRIMARY_HOVER,
                      command=on_continue).pack(side="left", padx=10)
        ctk.CTkButton(buttons, text="Start over", width=160, height=48, corner_radius=24,
                      font=(cfg.FONT_FAMILY, 16),
                      fg_color=cfg.DANGER, command=on_reset).pack(side="left", padx=10)

    def show(self, seconds_remaining: int):
        self.set_countdown(seconds_remaining)
        self.place(relx=0.5, rely=0.5, anchor="center")
        self.lift()

    def hide(self):
        self.place_forget()

    def set_countdown(self, seconds_remaining: int):
        self.countdown_label.configure(text=f"The session resets in {seconds_remaining} s")
