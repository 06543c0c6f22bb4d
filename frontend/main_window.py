# frontend/main_window.py
import logging
import threading

import customtkinter as ctk

from frontend import config as cfg
from frontend.api_client import KioskApiClient, KioskApiError
from frontend.scheduler import ACTIVITY_EVENTS, TkScheduler
from frontend.screens.catalog import CatalogScreen
from frontend.screens.chat import ChatScreen
from frontend.screens.idle import IdleScreen
from frontend.screens.product import ProductScreen
from frontend.screens.session_warning import SessionWarning
from src.core.models import IdleConfig
from src.navigation.store import NavigationStore
from src.session import IdleTimer, SessionTimeout

logger = logging.getLogger(__name__)


class KioskApp(ctk.CTk):
    def __init__(self, api: KioskApiClient = None):
        super().__init__()
        self.api = api or KioskApiClient()
        self._load_branding()

        self.title(cfg.APP_TITLE)
        self.geometry(cfg.WINDOW_SIZE)
        self.minsize(1024, 600)
        self.configure(fg_color=cfg.BG_COLOR)

        self.store = NavigationStore()
        self.categories = []
        self.company_product = None
        self.idle_config = IdleConfig()

        self.current_frame = None
        self.chat_frame = None
        self.idle_frame = None

        scheduler = TkScheduler(self)
        self.idle_timer = IdleTimer(scheduler, cfg.IDLE_TIMEOUT, on_idle=self.show_idle)
        self.session_timeout = SessionTimeout(
            scheduler, cfg.SESSION_WARNING, cfg.SESSION_TIMEOUT,
            on_warning=self._on_session_warning,
            on_timeout=self._on_session_timeout,
            on_countdown=self._on_countdown,
        )
        self.session_warning = SessionWarning(
            self,
            on_continue=self._continue_session,
            on_reset=self.session_timeout.reset_session,
        )

        self.catalog_screen = CatalogScreen(self, self.store, [], on_chat=lambda: self.show_chat())
        self.store.subscribe(self._on_navigation)
        self._show(self.catalog_screen)

        for sequence in ACTIVITY_EVENTS:
            self.bind_all(sequence, self.record_activity, add="+")

        self.idle_timer.start()
        self.session_timeout.start()
        threading.Thread(target=self._thread_load_catalog, daemon=True).start()

    def _load_branding(self):
        try:
            cfg.apply_branding(self.api.branding())
        except KioskApiError as e:
            logger.warning(f"Branding unavailable, using defaults: {e}")

    # ---------- Data ----------
    def _thread_load_catalog(self):
        try:
            categories = self.api.categories()
            company = self.api.company_info()
            idle_config = self.api.idle_config()
        except KioskApiError as e:
            logger.error(f"Could not load catalog: {e}")
            return
        self.after(0, lambda: self._apply_catalog(categories, company, idle_config))

    def _apply_catalog(self, categories, company, idle_config):
        self.categories = categories
        self.company_product = company
        self.idle_config = idle_config
        self.idle_timer.set_idle_time(idle_config.timeout_seconds * 1000)
        self.catalog_screen.set_categories(categories)
        logger.info(f"Catalog loaded: {len(categories)} root categories")

    # ---------- Screens ----------
    def _show(self, frame):
        if self.current_frame is not None and self.current_frame is not frame:
            if self.current_frame is self.catalog_screen:
                self.current_frame.pack_forget()
            else:
                self.current_frame.destroy()
        self.current_frame = frame
        frame.pack(fill="both", expand=True)

    def _on_navigation(self, state):
        if state.selected_product is not None:
            self._show(ProductScreen(self, state.selected_product,
                                     on_back=self._close_product, on_chat=self.show_chat))
        elif self.current_frame is not self.catalog_screen:
            self._show(self.catalog_screen)

    def _close_product(self):
        # Back from a product returns to its category with the menu open
        state = self.store.state
        if state.breadcrumb:
            self.store.navigate_to_breadcrumb_level(len(state.breadcrumb) - 1)
        else:
            self.store.go_home()
            self._show(self.catalog_screen)

    def show_chat(self, product=None):
        self.close_chat()
        self.chat_frame = ChatScreen(self, controller=self, api=self.api,
                                     product=product or self.store.state.selected_product)
        self.chat_frame.place(relx=0, rely=0, relwidth=1, relheight=1)
        self.chat_frame.lift()

    def close_chat(self):
        if self.chat_frame is not None:
            self.chat_frame.destroy()
            self.chat_frame = None

    # ---------- Idle ----------
    def show_idle(self):
        if self.idle_frame is not None:
            return
        self.idle_frame = IdleScreen(self, on_dismiss=self.dismiss_idle)
        self.idle_frame.place(relx=0, rely=0, relwidth=1, relheight=1)
        self.idle_frame.lift()

    def dismiss_idle(self):
        if self.idle_frame is None:
            return
        self.idle_frame.destroy()
        self.idle_frame = None
        self.close_chat()
        self.store.go_home()
        if self.company_product is not None:
            self.store.navigate_to_product(self.company_product)
        self.idle_timer.reset_timer()

    # ---------- Session ----------
    def record_activity(self, event=None):
        self.idle_timer.reset_timer()
        self.session_timeout.record_activity()

    def _continue_session(self):
        self.session_warning.hide()
        self.session_timeout.continue_session()

    def _on_session_warning(self):
        self.session_warning.show(self.session_timeout.seconds_remaining)

    def _on_countdown(self, seconds_remaining):
        self.session_warning.set_countdown(seconds_remaining)

    def _on_session_timeout(self):
        logger.info("Session timed out; returning home")
        self.session_warning.hide()
        self.close_chat()
        self.store.go_home()
        self._show(self.catalog_screen)
        threading.Thread(target=self._thread_clear_history, daemon=True).start()

    def _thread_clear_history(self):
        try:
            self.api.clear_history()
        except KioskApiError as e:
            logger.warning(f"Could not clear chat history: {e}")

    def destroy(self):
        self.idle_timer.stop()
        self.session_timeout.stop()
        super().destroy()
