"""
Tkinter application module for the Eagles Roster Manager.

This module contains the desktop window: the welcome form, the roster list
with its search/filter/sort controls, the details panel and the farewell
message.
"""
import logging
import tkinter as tk
from tkinter import ttk, messagebox, simpledialog
from typing import List, Optional, Tuple

from ..models import RosterEntry, QueryCriteria
from ..services import (
    ServiceFactory, RosterLoadError, VisitorLogError, VisitorValidationError, query
)
from ..utils import (
    AppConfig,
    TEAM_INFO,
    ROLE_OPTIONS,
    TYPE_OPTIONS,
    SORT_OPTIONS,
    configure_logging,
    format_entry_label,
    format_entry_details,
    format_team_stats,
    icon_pixels,
)
from ..utils.constants import (
    WINDOW_TITLE,
    WINDOW_GEOMETRY,
    MIDNIGHT_GREEN,
    SILVER,
    BLACK,
    WHITE,
    DARK_GREEN,
    LIGHT_GREEN,
    CHARCOAL,
    FONT_FAMILY,
    WELCOME_TITLE,
    WELCOME_HEADING,
    WELCOME_HINT,
    INPUT_REQUIRED_TITLE,
    INPUT_REQUIRED_MESSAGE,
    FAREWELL_TITLE,
    FAREWELL_HEADING,
    FAREWELL_SUBTITLE,
    FAREWELL_TAGLINE,
)

logger = logging.getLogger(__name__)

ICON_SIZE = 64


def font(size: int, weight: str = "normal", slant: str = "roman") -> Tuple[str, int, str]:
    """Return a Tk font tuple in the application font family."""
    style = weight if slant == "roman" else f"{weight} {slant}"
    return (FONT_FAMILY, size, style)


class WelcomeDialog(simpledialog.Dialog):
    """Startup form asking for the visitor's name, email and favorite team."""

    def __init__(self, parent: tk.Misc):
        self.name_var = tk.StringVar(parent)
        self.email_var = tk.StringVar(parent)
        self.team_var = tk.StringVar(parent)
        self.result: Optional[Tuple[str, str, str]] = None
        super().__init__(parent, WELCOME_TITLE)

    def body(self, master):  # type: ignore[override]
        master.configure(background=MIDNIGHT_GREEN, padx=12, pady=12)
        tk.Label(
            master, text=WELCOME_HEADING, font=font(18, "bold"),
            foreground=WHITE, background=MIDNIGHT_GREEN
        ).grid(row=0, column=0, columnspan=2, sticky="w", pady=(8, 12))

        fields = (("Name:", self.name_var), ("Email:", self.email_var), ("Favorite Team:", self.team_var))
        entries = []
        for row, (label, var) in enumerate(fields, start=1):
            tk.Label(
                master, text=label, font=font(14), foreground=WHITE, background=MIDNIGHT_GREEN
            ).grid(row=row, column=0, sticky="w", padx=6, pady=6)
            entry = tk.Entry(master, textvariable=var, width=15)
            entry.grid(row=row, column=1, sticky="ew", padx=6, pady=6)
            entries.append(entry)

        tk.Label(
            master, text=WELCOME_HINT, font=font(12, slant="italic"),
            foreground=SILVER, background=MIDNIGHT_GREEN
        ).grid(row=4, column=0, columnspan=2, sticky="w", padx=6, pady=(8, 4))
        master.columnconfigure(1, weight=1)
        return entries[0]

    def validate(self) -> bool:
        if not self.name_var.get().strip() or not self.team_var.get().strip():
            messagebox.showwarning(INPUT_REQUIRED_TITLE, INPUT_REQUIRED_MESSAGE, parent=self)
            return False
        return True

    def apply(self) -> None:  # type: ignore[override]
        self.result = (
            self.name_var.get().strip(),
            self.email_var.get().strip(),
            self.team_var.get().strip(),
        )


class RosterManagerApp(tk.Tk):
    """Main application window for the Eagles Roster Manager."""

    def __init__(self, factory: Optional[ServiceFactory] = None):
        super().__init__()
        self.withdraw()
        self.title(WINDOW_TITLE)
        self.geometry(WINDOW_GEOMETRY)
        self.configure(background=CHARCOAL)

        self.factory = factory or ServiceFactory()
        self.roster_store = self.factory.get_roster_store()
        self.visitor_log = self.factory.get_visitor_log()
        self.roster: List[RosterEntry] = []
        self.visible_entries: List[RosterEntry] = []
        self._icon: Optional[tk.PhotoImage] = None

        self.search_var = tk.StringVar(self)
        self.role_var = tk.StringVar(self, value=ROLE_OPTIONS[0])
        self.type_var = tk.StringVar(self, value=TYPE_OPTIONS[0])
        self.sort_var = tk.StringVar(self, value=SORT_OPTIONS[0])

        self.protocol("WM_DELETE_WINDOW", self.on_close)

    # ---------- Startup ---------- #
    def welcome(self) -> bool:
        """
        Show the welcome form and log the visitor.

        Returns:
            False if the visitor cancelled the form
        """
        dialog = WelcomeDialog(self)
        if dialog.result is None:
            return False

        name, email, team = dialog.result
        try:
            self.visitor_log.record_visit(name, email, team)
        except (VisitorLogError, VisitorValidationError) as e:
            logger.warning("Visitor entry not saved: %s", e)
            messagebox.showerror("Error", str(e))
        return True

    def load_roster(self) -> None:
        """Seed and load the roster file, reporting failures to the user."""
        try:
            self.roster_store.ensure_roster_file()
        except RosterLoadError as e:
            logger.exception("Could not create roster file")
            messagebox.showerror("Error", str(e))

        try:
            self.roster = self.roster_store.load_roster()
        except RosterLoadError as e:
            logger.exception("Could not load roster file")
            messagebox.showerror("Error", str(e))
            self.roster = []

    def show(self) -> None:
        """Build the main window for the loaded roster and display it."""
        self._build_ui()
        self._set_icon()
        self.refresh_roster()
        self.deiconify()

    # ---------- UI Scaffolding ---------- #
    def _build_ui(self):
        root = tk.Frame(self, background=CHARCOAL, padx=15, pady=15)
        root.pack(fill="both", expand=True)

        self._build_header(root)
        self._build_bottom(root)
        self._build_roster_panes(root)

    def _build_header(self, parent):
        top = tk.Frame(
            parent, background=MIDNIGHT_GREEN, padx=15, pady=15,
            highlightbackground=SILVER, highlightthickness=3
        )
        top.pack(side="top", fill="x", pady=(0, 10))

        tk.Label(
            top, text=f"🦅 {TEAM_INFO.name}", font=font(28, "bold"),
            foreground=WHITE, background=MIDNIGHT_GREEN
        ).pack(anchor="w")
        tk.Label(
            top, text=TEAM_INFO.description, font=font(13), wraplength=900, justify="left",
            foreground=WHITE, background=MIDNIGHT_GREEN
        ).pack(anchor="w", pady=10)

        meta = tk.Frame(top, background=DARK_GREEN, padx=10, pady=8)
        meta.pack(fill="x")
        for text in (f"🏈 Coach: {TEAM_INFO.coach}", f"🏟️ Stadium: {TEAM_INFO.stadium}"):
            tk.Label(
                meta, text=text, font=font(13, "bold"), foreground=WHITE, background=DARK_GREEN
            ).pack(side="left", padx=(0, 20))

    def _build_roster_panes(self, parent):
        split = tk.PanedWindow(parent, orient="horizontal", background=CHARCOAL, sashwidth=8)
        split.pack(side="top", fill="both", expand=True)

        left = tk.Frame(split, background=CHARCOAL)
        tk.Label(
            left, text="ROSTER", font=font(16, "bold"), foreground=SILVER, background=CHARCOAL
        ).pack(anchor="w", padx=10, pady=(5, 10))
        list_frame = tk.Frame(left, highlightbackground=MIDNIGHT_GREEN, highlightthickness=2)
        list_frame.pack(fill="both", expand=True)
        self.roster_list = tk.Listbox(
            list_frame, selectmode="browse", font=font(13), activestyle="none",
            background=DARK_GREEN, foreground=WHITE, borderwidth=0,
            selectbackground=LIGHT_GREEN, selectforeground=WHITE
        )
        list_scroll = ttk.Scrollbar(list_frame, orient="vertical", command=self.roster_list.yview)
        self.roster_list.configure(yscrollcommand=list_scroll.set)
        self.roster_list.pack(side="left", fill="both", expand=True)
        list_scroll.pack(side="right", fill="y")
        self.roster_list.bind("<<ListboxSelect>>", self._on_select)
        split.add(left, width=425)

        right = tk.Frame(split, background=CHARCOAL)
        tk.Label(
            right, text="DETAILS", font=font(16, "bold"), foreground=SILVER, background=CHARCOAL
        ).pack(anchor="w", padx=10, pady=(5, 10))
        self.details = tk.Text(
            right, font=font(14), wrap="word", padx=15, pady=15, state="disabled",
            background=DARK_GREEN, foreground=WHITE,
            highlightbackground=MIDNIGHT_GREEN, highlightthickness=2, borderwidth=0
        )
        self.details.pack(fill="both", expand=True)
        split.add(right)

    def _build_bottom(self, parent):
        bottom = tk.Frame(parent, background=CHARCOAL)
        bottom.pack(side="bottom", fill="x", pady=(10, 0))

        search_frame = tk.Frame(
            bottom, background=MIDNIGHT_GREEN, padx=15, pady=10,
            highlightbackground=SILVER, highlightthickness=2
        )
        search_frame.pack(fill="x")
        tk.Label(
            search_frame, text="🔍 SEARCH ROSTER:", font=font(13, "bold"),
            foreground=WHITE, background=MIDNIGHT_GREEN
        ).pack(side="left", padx=(0, 10))
        tk.Entry(
            search_frame, textvariable=self.search_var, width=30, font=font(14),
            background=WHITE, foreground=BLACK
        ).pack(side="left", fill="x", expand=True)
        self.search_var.trace_add("write", lambda *_: self.refresh_roster())

        filter_frame = tk.Frame(
            bottom, background=MIDNIGHT_GREEN, padx=15, pady=5,
            highlightbackground=SILVER, highlightthickness=1
        )
        filter_frame.pack(fill="x")
        dropdowns = (
            ("Filter by Role:", self.role_var, ROLE_OPTIONS),
            ("Filter by Type:", self.type_var, TYPE_OPTIONS),
            ("Sort by:", self.sort_var, SORT_OPTIONS),
        )
        for label, var, options in dropdowns:
            tk.Label(
                filter_frame, text=label, font=font(12, "bold"),
                foreground=WHITE, background=MIDNIGHT_GREEN
            ).pack(side="left", padx=(0, 5), pady=10)
            combo = ttk.Combobox(filter_frame, textvariable=var, values=options, state="readonly", width=16)
            combo.pack(side="left", padx=(0, 20))
            combo.bind("<<ComboboxSelected>>", lambda *_: self.refresh_roster())

        stats_frame = tk.Frame(
            bottom, background=DARK_GREEN, padx=15, pady=10,
            highlightbackground=MIDNIGHT_GREEN, highlightthickness=2
        )
        stats_frame.pack(fill="x")
        tk.Label(
            stats_frame, text="📊 TEAM STATISTICS", font=font(14, "bold"),
            foreground=SILVER, background=DARK_GREEN
        ).pack(anchor="w", pady=(0, 8))
        tk.Label(
            stats_frame, text=format_team_stats(TEAM_INFO, len(self.roster)), font=font(13),
            justify="left", foreground=WHITE, background=DARK_GREEN
        ).pack(anchor="w")

    def _set_icon(self):
        self._icon = tk.PhotoImage(master=self, width=ICON_SIZE, height=ICON_SIZE)
        for y, row in enumerate(icon_pixels(ICON_SIZE, MIDNIGHT_GREEN, SILVER)):
            for x, color in enumerate(row):
                if color is not None:
                    self._icon.put(color, (x, y))
        self.iconphoto(True, self._icon)

    # ---------- Roster View ---------- #
    def current_criteria(self) -> QueryCriteria:
        """Build query criteria from the current widget values."""
        return QueryCriteria.from_ui(
            self.search_var.get(),
            self.role_var.get(),
            self.type_var.get(),
            self.sort_var.get(),
        )

    def refresh_roster(self) -> None:
        """Re-run the roster query and redraw the list."""
        self.visible_entries = query(self.roster, self.current_criteria())
        self.roster_list.delete(0, tk.END)
        for entry in self.visible_entries:
            self.roster_list.insert(tk.END, format_entry_label(entry))
        self._set_details("")

    def _on_select(self, _event=None):
        selection = self.roster_list.curselection()
        if not selection:
            self._set_details("")
            return
        self._set_details(format_entry_details(self.visible_entries[selection[0]]))

    def _set_details(self, text: str) -> None:
        self.details.configure(state="normal")
        self.details.delete("1.0", tk.END)
        self.details.insert("1.0", text)
        self.details.configure(state="disabled")

    # ---------- Shutdown ---------- #
    def on_close(self) -> None:
        """Say goodbye and close the window."""
        messagebox.showinfo(
            FAREWELL_TITLE,
            f"{FAREWELL_HEADING}\n\n{FAREWELL_SUBTITLE}\n\n{FAREWELL_TAGLINE}",
            parent=self,
        )
        self.destroy()


def create_tkinter_app(config: Optional[AppConfig] = None) -> RosterManagerApp:
    """
    Create and return the main Tkinter application.

    Args:
        config: Application configuration; defaults to AppConfig.from_env()

    Returns:
        RosterManagerApp instance with no roster loaded yet
    """
    return RosterManagerApp(ServiceFactory(config))


def run_tkinter_app(config: Optional[AppConfig] = None) -> None:
    """Run the Tkinter application: welcome form, roster load, main loop."""
    config = config or AppConfig.from_env()
    configure_logging(config.log_level)

    app = create_tkinter_app(config)
    if not app.welcome():
        logger.info("Welcome form cancelled; exiting")
        app.destroy()
        return

    app.load_roster()
    app.show()
    app.mainloop()


if __name__ == "__main__":
    run_tkinter_app()
