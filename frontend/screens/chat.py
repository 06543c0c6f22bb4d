# frontend/screens/chat.py
import logging
import threading

import customtkinter as ctk

from frontend import config as cfg
from frontend.api_client import KioskApiClient, KioskApiError
from src.services.audio_client import AudioClient

logger = logging.getLogger(__name__)


class ChatScreen(ctk.CTkFrame):
    """
    Chat with the product assistant. Requests run on worker threads and
    results are marshalled back to the Tk loop with ``self.after(0, ...)``.
    """

    def __init__(self, parent, controller, api: KioskApiClient, product=None):
        super().__init__(parent, fg_color=cfg.BG_COLOR)
        self.controller = controller
        self.api = api
        self.product = product
        self.audio_client = AudioClient(cfg.TRANSCRIBE_URL)
        self.is_generating = False
        self.is_recording = False
        self.ai_bubble_label = None

        self.grid_rowconfigure(1, weight=1)
        self.grid_columnconfigure(0, weight=1)
        self._build_ui()
        self.add_chat_bubble("ai", self._greeting())

    def _greeting(self):
        if self.product:
            return f"Hi! Ask me anything about {self.product.name}."
        return "Hi! How can I help you today?"

    # ---------- UI ----------
    def _build_ui(self):
        header = ctk.CTkFrame(self, fg_color="transparent")
        header.grid(row=0, column=0, sticky="ew", padx=20, pady=15)

        ctk.CTkButton(
            header, text="Close", width=90, height=40, corner_radius=20,
            font=(cfg.FONT_FAMILY, 15),
            fg_color=cfg.CARD_BG, text_color=cfg.TEXT_COLOR_DARK,
            border_width=1, border_color=cfg.BORDER_COLOR, hover_color=cfg.BORDER_COLOR,
            command=self.controller.close_chat,
        ).pack(side="left")
        title = f"Assistant · {self.product.name}" if self.product else "Assistant"
        ctk.CTkLabel(header, text=title, font=(cfg.FONT_FAMILY, 22, "bold"),
                     text_color=cfg.TEXT_COLOR_DARK).pack(side="left", padx=20)

        self.model_menu = ctk.CTkOptionMenu(header, values=["…"], width=220,
                                            command=self.on_model_selected)
        self.model_menu.pack(side="right")
        threading.Thread(target=self._thread_load_models, daemon=True).start()

        self.chat_frame = ctk.CTkScrollableFrame(self, fg_color=cfg.CARD_BG, corner_radius=20)
        self.chat_frame.grid(row=1, column=0, sticky="nsew", padx=20)

        self.status_label = ctk.CTkLabel(self, text="", font=(cfg.FONT_FAMILY, 13),
                                         text_color=cfg.MUTED)
        self.status_label.grid(row=2, column=0, sticky="w", padx=30, pady=(5, 0))

        # Input pill
        input_bar = ctk.CTkFrame(self, fg_color=cfg.CARD_BG, corner_radius=30,
                                 border_width=1, border_color=cfg.BORDER_COLOR)
        input_bar.grid(row=3, column=0, sticky="ew", padx=20, pady=(5, 20))
        input_bar.grid_columnconfigure(0, weight=1)

        self.entry = ctk.CTkEntry(input_bar, placeholder_text="Type your question...",
                                  height=48, border_width=0, fg_color="transparent",
                                  font=(cfg.FONT_FAMILY, 16))
        self.entry.grid(row=0, column=0, sticky="ew", padx=(20, 10), pady=6)
        self.entry.bind("<Return>", self.on_send)

        self.btn_mic = ctk.CTkButton(input_bar, text="Mic", width=70, height=40, corner_radius=20,
                                     fg_color=cfg.ACCENT, command=self.on_mic)
        self.btn_mic.grid(row=0, column=1, padx=5)
        self.btn_send = ctk.CTkButton(input_bar, text="Send", width=80, height=40, corner_radius=20,
                                      fg_color=cfg.PRIMARY, hover_color=cfg.PRIMARY_HOVER,
                                      command=self.on_send)
        self.btn_send.grid(row=0, column=2, padx=(5, 10))

    def add_chat_bubble(self, role, text, is_error=False):
        container = ctk.CTkFrame(self.chat_frame, fg_color="transparent")
        container.pack(anchor="w" if role == "ai" else "e", padx=10, pady=5, fill="x")

        if role == "ai":
            bubble = ctk.CTkFrame(container, fg_color=cfg.AI_BUBBLE_COLOR, corner_radius=20,
                                  border_width=1, border_color=cfg.DANGER if is_error else cfg.BORDER_COLOR)
            bubble.pack(side="left")
            text_color = cfg.DANGER if is_error else cfg.TEXT_COLOR_DARK
            justify = "left"
        else:
            bubble = ctk.CTkFrame(container, fg_color=cfg.USER_BUBBLE_COLOR, corner_radius=20)
            bubble.pack(anchor="e", padx=10)
            text_color = cfg.USER_TEXT_COLOR
            justify = "right"

        label = ctk.CTkLabel(bubble, text=text, font=(cfg.FONT_FAMILY, 16), text_color=text_color,
                             justify=justify, wraplength=self._bubble_wrap_length())
        label.pack(padx=20, pady=15)
        self.after(50, self.scroll_bottom)
        return label

    def _bubble_wrap_length(self):
        width = self.winfo_width()
        return max(300, int(width * 0.6)) if width > 1 else 500

    def scroll_bottom(self):
        self.chat_frame.update_idletasks()
        self.chat_frame._parent_canvas.yview_moveto(1.0)

    def set_generating_state(self, is_generating):
        self.is_generating = is_generating
        state = "disabled" if is_generating else "normal"
        self.btn_send.configure(state=state)
        self.btn_mic.configure(state=state)
        self.status_label.configure(text="Thinking..." if is_generating else "")

    # ---------- Models ----------
    def _thread_load_models(self):
        try:
            info = self.api.models()
        except KioskApiError as e:
            logger.warning(f"Could not load models: {e}")
            return
        self.after(0, lambda: self._apply_models(info))

    def _apply_models(self, info):
        labels = {m["model"]: m["label"] for m in info.get("available", [])}
        self._model_by_label = {label: model for model, label in labels.items()}
        if not labels:
            self.model_menu.configure(values=["No API key"], state="disabled")
            self.model_menu.set("No API key")
            return
        self.model_menu.configure(values=list(labels.values()), state="normal")
        self.model_menu.set(labels.get(info.get("model"), next(iter(labels.values()))))

    def on_model_selected(self, label):
        model = getattr(self, "_model_by_label", {}).get(label)
        if not model:
            return
        self.controller.record_activity()

        def worker():
            try:
                self.api.select_model(model)
            except KioskApiError as e:
                self.after(0, lambda: self.status_label.configure(text=f"Model not changed: {e}"))

        threading.Thread(target=worker, daemon=True).start()

    # ---------- Sending ----------
    def on_send(self, event=None):
        text = self.entry.get().strip()
        if not text or self.is_generating:
            return
        self.entry.delete(0, "end")
        self.controller.record_activity()
        self.on_send_submit(text)

    def on_send_submit(self, text):
        self.add_chat_bubble("user", text)
        self.set_generating_state(True)
        self.ai_bubble_label = self.add_chat_bubble("ai", "...")
        threading.Thread(target=self._thread_ask_ai, args=(text,), daemon=True).start()

    def _thread_ask_ai(self, question):
        product_path = self.product.path if self.product else None
        try:
            reply = self.api.send_chat(question, product_path)
            self.after(0, lambda: self._finalize_response(reply))
        except KioskApiError as e:
            logger.error(f"Chat request failed: {e}")
            self.after(0, lambda: self._finalize_response(str(e), is_error=True))

    def _finalize_response(self, text, is_error=False):
        if self.ai_bubble_label is not None:
            self.ai_bubble_label.master.master.destroy()
            self.ai_bubble_label = None
        self.add_chat_bubble("ai", text, is_error=is_error)
        self.set_generating_state(False)

    # ---------- Voice ----------
    def on_mic(self):
        if self.is_recording or self.is_generating:
            return
        self.controller.record_activity()
        self.is_recording = True
        self.btn_mic.configure(fg_color=cfg.DANGER, text="...")
        self.status_label.configure(text="Listening...")
        threading.Thread(target=self._thread_listen, daemon=True).start()

    def _thread_listen(self):
        def cb(msg):
            self.after(0, lambda: self.status_label.configure(text=msg))
        try:
            text = self.audio_client.listen(status_callback=cb)
        except OSError as e:
            # No microphone available
            logger.error(f"Microphone error: {e}")
            text = None
        self.after(0, lambda: self._on_listen_done(text))

    def _on_listen_done(self, text):
        self.is_recording = False
        self.btn_mic.configure(fg_color=cfg.ACCENT, text="Mic")
        if text:
            self.status_label.configure(text="")
            self.on_send_submit(text)
        else:
            self.status_label.configure(text="Sorry, I didn't catch that.")
