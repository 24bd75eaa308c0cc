from datetime import date
from tkinter import Tk, StringVar, ttk

from .analysis import PasswordAnalyzer
from .cli import format_report
from .personal import UserProfile
from .scoring import Strength

# ---------------------------
# Simple Tkinter GUI
# ---------------------------

STRENGTH_BAR_COLORS = {
    Strength.STRONG: "#2EC676",
    Strength.MODERATE: "#FFAD41",
    Strength.WEAK: "#DC5252",
}


def parse_birth_date(text: str):
    try:
        return date.fromisoformat(text.strip())
    except ValueError:
        return None


class PassCodeApp:
    def __init__(self, root, analyzer=None):
        self.root = root
        self.analyzer = analyzer or PasswordAnalyzer()
        self.root.title("PassCode: Password Strength Checker")
        self.root.geometry("640x460")

        self.pw_var = StringVar()
        self.name_var = StringVar()
        self.email_var = StringVar()
        self.birth_var = StringVar()
        self.result_var = StringVar()

        self.entry = self._field("Enter Password:", self.pw_var, show="*")
        self._field("Name (optional):", self.name_var)
        self._field("Email (optional):", self.email_var)
        self._field("Birth date, YYYY-MM-DD (optional):", self.birth_var)

        self.style = ttk.Style()
        if "clam" in self.style.theme_names():
            self.style.theme_use("clam")

        self.progress = ttk.Progressbar(root, orient="horizontal", length=320,
                                        mode="determinate", maximum=100,
                                        style="Strength.Horizontal.TProgressbar")
        self.progress.pack(pady=10)

        ttk.Label(root, textvariable=self.result_var, wraplength=560, justify="left").pack(pady=4)

        self.entry.focus_set()
        self.on_change()

    def _field(self, label, variable, show=""):
        ttk.Label(self.root, text=label).pack(pady=(8, 2))
        entry = ttk.Entry(self.root, textvariable=variable, show=show, width=50)
        entry.pack()
        entry.bind("<KeyRelease>", self.on_change)
        return entry

    def profile(self):
        name = self.name_var.get().strip()
        email = self.email_var.get().strip()
        born = parse_birth_date(self.birth_var.get())
        if not (name or email or born):
            return None
        return UserProfile(name=name, email=email, birth_date=born)

    def on_change(self, event=None):
        res = self.analyzer.analyze(self.pw_var.get(), self.profile())
        self.progress["value"] = res.score
        self.style.configure("Strength.Horizontal.TProgressbar",
                             background=STRENGTH_BAR_COLORS[res.strength])
        self.result_var.set(format_report(res))


def main():
    root = Tk()
    PassCodeApp(root)
    root.mainloop()


if __name__ == "__main__":
    main()
