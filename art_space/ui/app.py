"""Main Tkinter application for Art Space."""
import tkinter as tk
from tkinter import font as tkfont
import logging

from PIL import ImageTk

from ..config import AppSettings, ConfigError, load_settings, remember_window_size
from ..preview import fit_image, BUTTON_GAP, SHADOW_COLOR, WALL_MARGIN, WALL_SHADOW
from ..resources import ResourceResolver
from ..view_model import GalleryViewModel

logger = logging.getLogger(__name__)


class ToolTip:
    """Tooltip widget describing the widget under the mouse."""
    def __init__(self, widget, text=""):
        self.widget = widget
        self.text = text
        self.tip_window = None
        self.after_id = None
        self.widget.bind('<Enter>', self.on_enter)
        self.widget.bind('<Leave>', self.on_leave)

    def on_enter(self, event=None):
        """Show tooltip after a short delay."""
        self.after_id = self.widget.after(500, self.show_tooltip)

    def on_leave(self, event=None):
        """Hide tooltip when mouse leaves widget."""
        if self.after_id:
            self.widget.after_cancel(self.after_id)
            self.after_id = None
        self.hide_tooltip()

    def show_tooltip(self):
        """Display the tooltip."""
        if self.tip_window or not self.text:
            return

        x = self.widget.winfo_rootx() + 25
        y = self.widget.winfo_rooty() + 20

        self.tip_window = tw = tk.Toplevel(self.widget)
        tw.wm_overrideredirect(True)
        tw.wm_geometry(f"+{x}+{y}")

        label = tk.Label(
            tw,
            text=self.text,
            justify=tk.LEFT,
            background="#ffffe0",
            relief=tk.SOLID,
            borderwidth=1,
            font=("Arial", 9)
        )
        label.pack(ipadx=5, ipady=2)

    def hide_tooltip(self):
        """Hide the tooltip."""
        if self.tip_window:
            self.tip_window.destroy()
            self.tip_window = None


class ArtSpaceApp(tk.Tk):
    """Main application window."""

    def __init__(self, settings: AppSettings = None, view_model: GalleryViewModel = None,
                 resolver: ResourceResolver = None):
        """
        Initialize the application.

        Args:
            settings: Application settings (optional)
            view_model: Gallery view-model; a fresh one starting on the first artwork by default
            resolver: Resource resolver (optional)
        """
        super().__init__()

        self.settings = settings or load_settings()
        self.view_model = view_model or GalleryViewModel()
        self.resolver = resolver or ResourceResolver(self.settings)

        # Reference to the displayed PhotoImage to prevent garbage collection
        self._photo = None
        self._image_item = None
        self._resize_pending = False

        self.setup_window()
        self.create_widgets()
        self.create_key_bindings()

        self.view_model.add_listener(self.on_view_model_changed)
        self.show_current_artwork()

    def setup_window(self):
        """Set up the main window."""
        self.title(self.resolver.get_string("app_name"))
        self.geometry(f"{self.settings.window_width}x{self.settings.window_height}")
        self.configure(bg="white")
        self.protocol("WM_DELETE_WINDOW", self.on_closing)

    def create_widgets(self):
        """Create UI widgets."""
        pad = self.settings.outer_padding

        self.main_frame = tk.Frame(self, bg="white")
        self.main_frame.pack(fill=tk.BOTH, expand=True, padx=pad, pady=pad)

        # Display controller (packed first so it keeps its place at the bottom)
        self.controller_frame = tk.Frame(self.main_frame, bg="white")
        self.controller_frame.pack(side=tk.BOTTOM, fill=tk.X, pady=(pad, 0))
        self.controller_frame.columnconfigure(0, weight=1, uniform="buttons")
        self.controller_frame.columnconfigure(2, weight=1, uniform="buttons")
        self.controller_frame.columnconfigure(1, minsize=BUTTON_GAP)

        button_font = tkfont.Font(size=self.settings.caption_font_size)
        self.previous_button = tk.Button(
            self.controller_frame,
            text=self.resolver.get_string("previous_button"),
            command=self.view_model.go_previous,
            font=button_font
        )
        self.previous_button.grid(row=0, column=0, sticky="ew")

        self.counter_label = tk.Label(
            self.controller_frame,
            text=self.view_model.position_label(),
            font=button_font,
            bg="white"
        )
        self.counter_label.grid(row=0, column=1)

        self.next_button = tk.Button(
            self.controller_frame,
            text=self.resolver.get_string("next_button"),
            command=self.view_model.go_next,
            font=button_font
        )
        self.next_button.grid(row=0, column=2, sticky="ew")

        # Descriptor
        self.descriptor_frame = tk.Frame(self.main_frame, bg=self.settings.descriptor_background)
        self.descriptor_frame.pack(side=tk.BOTTOM, fill=tk.X, pady=(pad, 0))

        self.title_label = tk.Label(
            self.descriptor_frame,
            font=tkfont.Font(size=self.settings.title_font_size, weight="normal"),
            bg=self.settings.descriptor_background,
            anchor=tk.W,
            justify=tk.LEFT
        )
        self.title_label.pack(side=tk.TOP, fill=tk.X, padx=16, pady=(16, 8))

        self.artist_year_label = tk.Label(
            self.descriptor_frame,
            font=tkfont.Font(size=self.settings.caption_font_size, weight="bold"),
            bg=self.settings.descriptor_background,
            anchor=tk.W,
            justify=tk.LEFT
        )
        self.artist_year_label.pack(side=tk.TOP, fill=tk.X, padx=16, pady=(0, 16))

        # Artwork wall: the shadow frame shows only along the bottom and right edges
        self.shadow_frame = tk.Frame(self.main_frame, bg=SHADOW_COLOR)
        self.shadow_frame.pack(side=tk.TOP, fill=tk.BOTH, expand=True, padx=WALL_MARGIN, pady=WALL_MARGIN)
        self.image_canvas = tk.Canvas(
            self.shadow_frame,
            bg="white",
            highlightthickness=2,
            highlightbackground=self.settings.border_color
        )
        self.image_canvas.pack(side=tk.TOP, fill=tk.BOTH, expand=True, padx=(0, WALL_SHADOW), pady=(0, WALL_SHADOW))
        self.image_canvas.bind("<Configure>", self.on_canvas_resized)
        self.image_tooltip = ToolTip(self.image_canvas)

    def create_key_bindings(self):
        """Set up keyboard shortcuts."""
        if not self.settings.keyboard_navigation:
            return
        self.bind("<Left>", lambda e: self.view_model.go_previous())
        self.bind("<Right>", lambda e: self.view_model.go_next())

    def on_view_model_changed(self, view_model: GalleryViewModel):
        """Re-render after a navigation event."""
        self.show_current_artwork()

    def on_canvas_resized(self, event=None):
        """Throttle re-fitting the artwork while the window is resized."""
        if self._resize_pending:
            return
        self._resize_pending = True

        def refit():
            self._resize_pending = False
            self.show_current_image()

        self.after(50, refit)

    def show_current_artwork(self):
        """Display the current artwork's image, title and caption."""
        _, title_ref, artist_year_ref = self.view_model.current_display()
        title = self.resolver.get_string(title_ref)
        self.title_label.config(text=title)
        self.artist_year_label.config(text=self.resolver.get_string(artist_year_ref))
        self.counter_label.config(text=self.view_model.position_label())
        # The image description follows the displayed artwork
        self.image_tooltip.text = title
        self.show_current_image()

    def show_current_image(self):
        """Fit the current artwork image into the wall."""
        image_ref, title_ref, _ = self.view_model.current_display()
        title = self.resolver.get_string(title_ref)

        canvas_width = self.image_canvas.winfo_width()
        canvas_height = self.image_canvas.winfo_height()
        if canvas_width <= 1 or canvas_height <= 1:
            # Canvas not laid out yet, <Configure> will call back
            return

        inner = self.settings.image_padding
        image = fit_image(
            self.resolver.load_image(image_ref, label=title),
            canvas_width - 2 * inner,
            canvas_height - 2 * inner
        )
        self._photo = ImageTk.PhotoImage(image)
        self.image_canvas.delete("all")
        self._image_item = self.image_canvas.create_image(
            canvas_width // 2,
            canvas_height // 2,
            anchor=tk.CENTER,
            image=self._photo
        )

    def on_closing(self):
        """Handle window closing."""
        self.view_model.remove_listener(self.on_view_model_changed)
        try:
            remember_window_size(self.settings, self.winfo_width(), self.winfo_height())
        except ConfigError as e:
            logger.warning(f"Could not save window size: {e}")
        self.destroy()

    def run(self):
        """Start the application main loop."""
        self.mainloop()
