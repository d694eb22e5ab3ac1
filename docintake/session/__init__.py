from docintake.session.state import AppState, reduce
from docintake.session.workbench import Workbench, build_workbench

__all__ = ["AppState", "Workbench", "build_workbench", "reduce"]
