from typing import Callable, Dict, Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .client import Client
from .config.settings import get_settings
from .errors import SCIMClientError
from .models import GroupsResponse, User, UsersResponse, UserType
from .models.user import Email, Name
from .response import SCIMResult
from .utils.telemetry import setup_logging, setup_telemetry


console = Console()


class SCIMConsoleCLI:
    def __init__(self, client: Optional[Client] = None, console: Console = console):
        self.settings = get_settings()
        self.logger = setup_logging(self.settings.log_level)
        if self.settings.scim_trace_console:
            setup_telemetry()
        self.console = console
        self.client = client or Client.from_settings(self.settings)

        self.commands: Dict[str, Callable[[], None]] = {
            "1": self.list_users,
            "2": self.get_user,
            "3": self.find_user,
            "4": self.create_user,
            "5": self.change_user_type,
            "6": self.delete_user,
            "7": self.list_groups,
            "8": self.find_group,
            "9": self.create_group,
            "10": self.rename_group,
            "11": self.add_member,
            "12": self.remove_member,
            "13": self.delete_group,
        }

    def display_banner(self):
        banner = """
╔══════════════════════════════════════════════════════════════╗
║   New Relic SCIM Provisioning Console                        ║
╚══════════════════════════════════════════════════════════════╝
        """
        self.console.print(Panel(banner, style="bold cyan"))

    def display_menu(self):
        table = Table(title="Available Operations", show_header=True, header_style="bold magenta")
        table.add_column("#", style="cyan")
        table.add_column("Operation", style="green")

        for key, command in self.commands.items():
            table.add_row(key, command.__name__.replace("_", " "))
        table.add_row("0", "exit")

        self.console.print(table)

    def ask(self, prompt: str) -> str:
        return self.console.input(f"[bold cyan]{prompt}: [/bold cyan]").strip()

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------
    def render(self, result: SCIMResult) -> None:
        if not result.ok:
            error = result.error_response
            self.console.print(
                f"[yellow]SCIM error {escape(error.status)} ({escape(error.scim_type or 'n/a')}):[/yellow] "
                f"{escape(error.detail)}"
            )
            return

        response = result.response
        if isinstance(response, UsersResponse):
            self.render_users(response)
        elif isinstance(response, GroupsResponse):
            self.render_groups(response)
        else:
            for key, value in response.to_dict().items():
                self.console.print(f"[green]{key}:[/green] {escape(str(value))}")

    def render_users(self, users: UsersResponse) -> None:
        table = Table(title=f"Users ({users.total_results})", show_header=True, header_style="bold magenta")
        table.add_column("ID", style="cyan")
        table.add_column("User Name", style="green")
        table.add_column("Name")
        table.add_column("Active", style="yellow")

        for user in users.resources:
            table.add_row(
                user.id,
                escape(user.user_name),
                escape(f"{user.name.given_name} {user.name.family_name}".strip()),
                "yes" if user.active else "no",
            )

        self.console.print(table)

    def render_groups(self, groups: GroupsResponse) -> None:
        table = Table(title=f"Groups ({groups.total_results})", show_header=True, header_style="bold magenta")
        table.add_column("ID", style="cyan")
        table.add_column("Display Name", style="green")
        table.add_column("Members", style="yellow")

        for group in groups.resources:
            table.add_row(group.id, escape(group.display_name), str(len(group.members)))

        self.console.print(table)

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------
    def list_users(self):
        self.render(self.client.list_users())

    def get_user(self):
        self.render(self.client.get_user_by_id(self.ask("User ID")))

    def find_user(self):
        self.render(self.client.get_user_by_name(self.ask("User name")))

    def create_user(self):
        email = self.ask("Email")
        user = User(
            user_name=email,
            name=Name(given_name=self.ask("Given name"), family_name=self.ask("Family name")),
            emails=[Email(value=email, primary=True)],
            active=True,
            timezone=self.ask("Timezone (blank for default)"),
        )
        self.render(self.client.create_user(user))

    def change_user_type(self):
        user_id = self.ask("User ID")
        choice = self.ask("User type (full/core/basic)").upper()
        if choice not in UserType.__members__:
            self.console.print(f"[red]Unknown user type: {choice.lower()}[/red]")
            return
        self.render(self.client.change_user_type(user_id, UserType[choice]))

    def delete_user(self):
        user_id = self.ask("User ID")
        self.client.delete_user(user_id)
        self.console.print(f"[green]Deleted user {user_id}[/green]")

    def list_groups(self):
        self.render(self.client.list_groups())

    def find_group(self):
        self.render(self.client.get_group_by_name(self.ask("Group name")))

    def create_group(self):
        self.render(self.client.create_group(self.ask("Group name")))

    def rename_group(self):
        self.render(self.client.update_group(self.ask("Group ID"), self.ask("New group name")))

    def add_member(self):
        self.render(self.client.add_user_to_group(self.ask("Group ID"), self.ask("User ID")))

    def remove_member(self):
        self.render(self.client.remove_user_from_group(self.ask("Group ID"), self.ask("User ID")))

    def delete_group(self):
        group_id = self.ask("Group ID")
        self.client.delete_group(group_id)
        self.console.print(f"[green]Deleted group {group_id}[/green]")

    def handle(self, choice: str) -> bool:
        """Run one menu choice; return ``False`` when the user asked to exit."""
        if choice in {"0", "exit", "quit"}:
            return False

        command = self.commands.get(choice)
        if command is None:
            self.console.print("[red]Invalid choice. Please try again.[/red]")
            return True

        try:
            command()
        except SCIMClientError as e:
            self.console.print(f"[red]Error: {escape(str(e))}[/red]")
            self.logger.error("CLI error in %s: %s", command.__name__, e)
        return True

    def run(self):
        self.display_banner()

        while True:
            self.display_menu()
            choice = self.ask("Enter command").lower()
            if not self.handle(choice):
                self.console.print("\n[cyan]Bye.[/cyan]")
                break


def main():
    try:
        cli = SCIMConsoleCLI()
    except ValueError as exc:
        console.print(f"[red]{exc}[/red]")
        raise SystemExit(1)
    with cli.client:
        cli.run()


if __name__ == "__main__":
    main()
