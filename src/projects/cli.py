"""Interactive menu for working with projects."""

from collections.abc import Callable

from pydantic import ValidationError

from src.projects.core.exceptions import ProjectNotFound, ProjectsError
from src.projects.core.logging import bind_operation_context, clear_operation_context, get_logger
from src.projects.models import Project
from src.projects.schemas import ProjectCreate, ProjectUpdate, parse_int
from src.projects.services import ProjectService

logger = get_logger(__name__)

OPERATIONS = (
    "1) Add a project",
    "2) List projects",
    "3) Select a project",
    "4) Update project details",
    "5) Delete a project",
)


class ProjectsApp:
    """Menu loop over ProjectService.

    Projects are picked by their position in the most recently printed list;
    that mapping lives here only and is valid until the next listing.
    """

    def __init__(
        self,
        project_service: ProjectService,
        input_func: Callable[[str], str] = input,
        output: Callable[[str], None] = print,
    ):
        self.project_service = project_service
        self._input = input_func
        self._output = output
        self.current_project: Project | None = None
        self.last_listed: list[Project] = []
        self._actions: dict[int, Callable[[], None]] = {
            1: self.create_project,
            2: self.list_projects,
            3: self.select_project,
            4: self.update_project_details,
            5: self.delete_project,
        }

    def run(self) -> None:
        """Process selections until the operator enters a blank line."""
        while True:
            try:
                selection = self._get_selection()
                if selection is None:
                    self._output("Exiting the menu.")
                    return
                action = self._actions.get(selection)
                if action is None:
                    self._output(f"\n{selection} is not a valid selection. Try again.")
                    continue
                bind_operation_context(action.__name__, self._current_id())
                action()
            except (ProjectsError, ValidationError) as e:
                logger.warning("Operation failed", error=str(e))
                self._output(f"\nError: {e} Try again.")
            except EOFError:
                self._output("Exiting the menu.")
                return
            finally:
                clear_operation_context()

    # ---------- Operations ----------
    def create_project(self) -> None:
        project_in = ProjectCreate(
            project_name=self._prompt("Enter the project name") or "",
            estimated_hours=self._prompt("Enter the estimated hours"),
            actual_hours=self._prompt("Enter the actual hours"),
            difficulty=self._prompt("Enter the project difficulty (1-5)"),
            notes=self._prompt("Enter the project notes"),
        )
        project = self.project_service.add_project(project_in.to_project())
        self._output(f"Created project: {project.project_name}")

    def list_projects(self) -> None:
        self.last_listed = self.project_service.fetch_all_projects()
        self._output("\nProjects:")
        for number, project in enumerate(self.last_listed, start=1):
            self._output(f"   {number}: {project.project_name}")

    def select_project(self) -> None:
        self.list_projects()
        chosen = self._pick_from_list("Enter the number from the list to select")
        if chosen is None:
            self._output("Invalid selection.")
            return
        self.current_project = self.project_service.fetch_project_by_id(chosen.project_id)
        self._print_project(self.current_project)

    def update_project_details(self) -> None:
        current = self.current_project
        if current is None:
            self._output("\nPlease select a project.")
            return

        changes = ProjectUpdate(
            project_name=self._prompt(f"Enter the project name [{current.project_name}]"),
            estimated_hours=self._prompt(f"Enter estimated hours [{current.estimated_hours}]"),
            actual_hours=self._prompt(f"Enter actual hours [{current.actual_hours}]"),
            difficulty=self._prompt(
                f"Enter the project difficulty (1-5) [{current.difficulty}]"
            ),
            notes=self._prompt(f"Enter the project notes [{current.notes}]"),
        )
        self.project_service.modify_project_details(changes.apply_to(current))
        self.current_project = self.project_service.fetch_project_by_id(current.project_id)
        self._output("Project updated.")

    def delete_project(self) -> None:
        self.list_projects()
        chosen = self._pick_from_list("Enter the number from the list to delete")
        if chosen is None:
            self._output("Invalid selection. Nothing deleted.")
            return

        try:
            self.project_service.delete_project(chosen.project_id)
        except ProjectNotFound:
            self._output(f"No project with ID={chosen.project_id} found. Nothing deleted.")
            return

        self._output(f"Project '{chosen.project_name}' was deleted successfully.")
        if self._current_id() == chosen.project_id:
            self.current_project = None

    # ---------- Helpers ----------
    def _prompt(self, prompt: str) -> str | None:
        raw = self._input(f"{prompt}: ")
        return raw.strip() or None

    def _get_selection(self) -> int | None:
        self._print_operations()
        return parse_int(self._prompt("Enter a menu selection"))

    def _pick_from_list(self, prompt: str) -> Project | None:
        number = parse_int(self._prompt(prompt))
        if number is None or not 1 <= number <= len(self.last_listed):
            return None
        return self.last_listed[number - 1]

    def _current_id(self) -> int | None:
        return self.current_project.project_id if self.current_project else None

    def _print_operations(self) -> None:
        self._output("\nThese are the available selections. Press the Enter key to quit:")
        for line in OPERATIONS:
            self._output(f"  {line}")
        if self.current_project is None:
            self._output("\nYou are not working with a project.")
        else:
            self._output(f"\nYou are working with project: {self.current_project.project_name}")

    def _print_project(self, project: Project) -> None:
        self._output(f"\n   ID={project.project_id}")
        self._output(f"   name={project.project_name}")
        self._output(f"   estimated hours={project.estimated_hours}")
        self._output(f"   actual hours={project.actual_hours}")
        self._output(f"   difficulty={project.difficulty}")
        self._output(f"   notes={project.notes}")
        self._output("   Materials:")
        for material in project.materials:
            self._output(
                f"      {material.material_name} x{material.num_required} @ {material.cost}"
            )
        self._output("   Steps:")
        for step in project.steps:
            self._output(f"      {step.step_order}. {step.step_text}")
        self._output("   Categories:")
        for category in project.categories:
            self._output(f"      {category.category_name}")
