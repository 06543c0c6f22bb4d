# frontend/screens/catalog.py
import customtkinter as ctk

from frontend import config as cfg
from frontend.assets import assets
from src.core.models import Category, Product
from src.navigation.store import NavigationStore


class CatalogScreen(ctk.CTkFrame):
    """
    Breadcrumb bar plus a grid of the open category's children. At home the
    grid holds the root categories.
    """

    def __init__(self, parent, store: NavigationStore, categories, on_chat=None):
        super().__init__(parent, fg_color=cfg.BG_COLOR)
        self.store = store
        self.categories = list(categories)
        self.on_chat = on_chat

        self.grid_rowconfigure(1, weight=1)
        self.grid_columnconfigure(0, weight=1)

        self._build_header()
        self.grid_frame = ctk.CTkScrollableFrame(self, fg_color="transparent")
        self.grid_frame.grid(row=1, column=0, sticky="nsew", padx=20, pady=(0, 20))

        # Deferred: the tile that triggered the change is still inside its click handler
        self._unsubscribe = store.subscribe(lambda _state: self.after_idle(self.refresh))
        self.refresh()

    def destroy(self):
        self._unsubscribe()
        super().destroy()

    def set_categories(self, categories):
        self.categories = list(categories)
        self.refresh()

    # ---------- UI ----------
    def _build_header(self):
        header = ctk.CTkFrame(self, fg_color="transparent")
        header.grid(row=0, column=0, sticky="ew", padx=20, pady=15)
        header.grid_columnconfigure(2, weight=1)

        self.btn_home = ctk.CTkButton(
            header, text="Home", width=90, height=40, corner_radius=20,
            font=(cfg.FONT_FAMILY, 15, "bold"),
            fg_color=cfg.PRIMARY, hover_color=cfg.PRIMARY_HOVER,
            command=self.store.go_home,
        )
        self.btn_home.grid(row=0, column=0, padx=(0, 8))

        self.btn_back = ctk.CTkButton(
            header, text="Back", width=90, height=40, corner_radius=20,
            font=(cfg.FONT_FAMILY, 15),
            fg_color=cfg.CARD_BG, text_color=cfg.TEXT_COLOR_DARK,
            border_width=1, border_color=cfg.BORDER_COLOR, hover_color=cfg.BORDER_COLOR,
            command=self.store.go_back,
        )
        self.btn_back.grid(row=0, column=1, padx=(0, 15))

        self.breadcrumb_bar = ctk.CTkFrame(header, fg_color="transparent")
        self.breadcrumb_bar.grid(row=0, column=2, sticky="w")

        self.btn_menu = ctk.CTkButton(
            header, text="Hide menu", width=110, height=40, corner_radius=20,
            font=(cfg.FONT_FAMILY, 15),
            fg_color=cfg.CARD_BG, text_color=cfg.TEXT_COLOR_DARK,
            border_width=1, border_color=cfg.BORDER_COLOR, hover_color=cfg.BORDER_COLOR,
            command=self.store.toggle_menu,
        )
        self.btn_menu.grid(row=0, column=3, padx=(0, 8))

        if self.on_chat:
            ctk.CTkButton(
                header, text="Ask AI", width=110, height=40, corner_radius=20,
                font=(cfg.FONT_FAMILY, 15, "bold"),
                fg_color=cfg.ACCENT, command=self.on_chat,
            ).grid(row=0, column=4)

    def refresh(self):
        state = self.store.state
        self._render_breadcrumb(state)
        self.btn_back.configure(state="disabled" if state.is_home else "normal")

        for child in self.grid_frame.winfo_children():
            child.destroy()

        if state.current_category is None:
            self.btn_menu.configure(state="disabled", text="Hide menu")
            self._render_tiles(self.categories, [])
            return

        self.btn_menu.configure(state="normal", text="Hide menu" if state.is_menu_open else "Show menu")
        if not state.is_menu_open:
            ctk.CTkLabel(
                self.grid_frame, text="Tap Show menu to browse this category.",
                font=(cfg.FONT_FAMILY, 18), text_color=cfg.MUTED,
            ).pack(pady=60)
            return

        category = state.current_category
        if category.is_empty:
            ctk.CTkLabel(
                self.grid_frame, text="No content in this category yet.",
                font=(cfg.FONT_FAMILY, 18), text_color=cfg.MUTED,
            ).pack(pady=60)
            return
        self._render_tiles(category.subcategories, category.products)

    def _render_breadcrumb(self, state):
        for child in self.breadcrumb_bar.winfo_children():
            child.destroy()

        crumbs = ["Home"] + list(state.breadcrumb)
        for i, name in enumerate(crumbs):
            if i:
                ctk.CTkLabel(self.breadcrumb_bar, text="›", text_color=cfg.MUTED,
                             font=(cfg.FONT_FAMILY, 16)).pack(side="left", padx=4)
            is_last = i == len(crumbs) - 1
            ctk.CTkButton(
                self.breadcrumb_bar, text=name, width=0, height=30,
                fg_color="transparent", hover_color=cfg.BORDER_COLOR,
                text_color=cfg.TEXT_COLOR_DARK if is_last else cfg.TEXT_COLOR_LIGHT,
                font=(cfg.FONT_FAMILY, 15, "bold" if is_last else "normal"),
                # "Home" is level -1
                command=lambda level=i - 1: self.store.navigate_to_breadcrumb_level(level),
            ).pack(side="left")

    def _render_tiles(self, subcategories, products):
        items = [(c, self.store.navigate_to_category) for c in subcategories]
        items += [(p, self.store.navigate_to_product) for p in products]
        for col in range(cfg.GRID_COLUMNS):
            self.grid_frame.grid_columnconfigure(col, weight=1)

        for index, (item, action) in enumerate(items):
            row, col = divmod(index, cfg.GRID_COLUMNS)
            self._tile(item, action).grid(row=row, column=col, padx=10, pady=10, sticky="n")

    def _tile(self, item, action):
        tile = ctk.CTkFrame(self.grid_frame, fg_color=cfg.CARD_BG, corner_radius=16,
                            border_width=1, border_color=cfg.BORDER_COLOR)
        image = assets.image(self._tile_picture(item), cfg.TILE_SIZE)
        subtitle = self._subtitle(item)

        btn = ctk.CTkButton(
            tile, text=item.name, image=image, compound="top",
            width=cfg.TILE_SIZE[0], height=cfg.TILE_SIZE[1] + 40,
            fg_color="transparent", hover_color=cfg.BORDER_COLOR,
            text_color=cfg.TEXT_COLOR_DARK, font=(cfg.FONT_FAMILY, 16, "bold"),
            command=lambda: action(item),
        )
        btn.pack(padx=8, pady=(8, 0))
        ctk.CTkLabel(tile, text=subtitle, text_color=cfg.MUTED,
                     font=(cfg.FONT_FAMILY, 13)).pack(pady=(0, 8))
        return tile

    @staticmethod
    def _tile_picture(item):
        if item.thumbnail:
            return item.thumbnail
        if isinstance(item, Product):
            return next((m.path for m in item.media if m.type == "image"), None)
        return None

    @staticmethod
    def _subtitle(item):
        if isinstance(item, Category):
            return f"{len(item.subcategories) + len(item.products)} items"
        parts = []
        if item.image_count:
            parts.append(f"{item.image_count} photos")
        if item.video_count:
            parts.append(f"{item.video_count} videos")
        return ", ".join(parts)
