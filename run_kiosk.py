# run_kiosk.py
import logging
import os
import tkinter

import customtkinter as ctk

from src.core.logger import setup_logging

# Touchscreen boxes often start without DISPLAY set
if os.name != 'nt' and not os.environ.get('DISPLAY'):
    os.environ['DISPLAY'] = ':0.0'


def main():
    setup_logging("ui")
    logging.getLogger(__name__).info("Starting kiosk UI")

    from frontend.main_window import KioskApp

    ctk.set_appearance_mode("light")
    app = KioskApp()
    try:
        app.attributes('-fullscreen', True)
    except tkinter.TclError:
        sw, sh = app.winfo_screenwidth(), app.winfo_screenheight()
        app.geometry(f"{sw}x{sh}+0+0")

    # Escape leaves fullscreen for maintenance
    app.bind("<Escape>", lambda event: app.attributes('-fullscreen', False))
    app.mainloop()


if __name__ == "__main__":
    main()
