# frontend/screens/idle.py
import customtkinter as ctk

from frontend import config as cfg


class IdleScreen(ctk.CTkFrame):
    """
    Full-screen takeover while nobody is using the kiosk. Any tap dismisses it.

    Tk cannot play idle.mp4, so this is the branded fallback background.
    """

    def __init__(self, parent, on_dismiss):
        super().__init__(parent, fg_color=cfg.IDLE_BG, corner_radius=0)
        self.on_dismiss = on_dismiss

        container = ctk.CTkFrame(self, fg_color="transparent")
        container.place(relx=0.5, rely=0.5, anchor="center")

        ctk.CTkLabel(
            container, text=cfg.APP_TITLE.upper(),
            font=(cfg.FONT_FAMILY, 40, "bold"), text_color="#FFFFFF",
        ).pack(pady=(0, 10))
        ctk.CTkLabel(
            container, text="Touch the screen to start",
            font=(cfg.FONT_FAMILY, 20), text_color="#CBD5E1",
        ).pack()

        for widget in (self, container, *container.winfo_children()):
            widget.bind("<ButtonPress>", self._dismiss)

    def _dismiss(self, event=None):
        self.on_dismiss()
