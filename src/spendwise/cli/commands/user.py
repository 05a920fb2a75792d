"""User management commands."""

import click
from spendwise.cli.date_filters import resolve_amount, resolve_as_of
from spendwise.cli.error_handling import handle_domain_error
from spendwise.domain.errors import DomainError
from spendwise.domain.user import UserService


@click.group()
def user_group():
    """Manage users and their budgets."""
    pass


@user_group.command("create")
@click.argument("name", metavar="NAME")
@click.option("--email", required=True, help="Email address (used for budget alerts)")
@click.option("--budget", default="0", help="Monthly budget (0 for no budget)")
@click.option(
    "--notifications/--no-notifications",
    default=True,
    help="Email an alert when 80% of the budget is used",
)
@click.pass_context
def create_user(ctx, name: str, email: str, budget: str, notifications: bool):
    """Create a new user.

    Examples:
        spendwise user create "Alex" --email alex@example.com --budget 1500
    """
    db = ctx.obj["db"]
    service = UserService(db)
    budget_amount = resolve_amount(ctx, budget, "budget")

    try:
        user_id = service.create_user(
            name=name,
            email=email,
            budget=budget_amount,
            email_notifications=notifications,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)
        return
    click.echo(f"Created user '{name}' (ID: {user_id})")


@user_group.command("list")
@click.pass_context
def list_users(ctx):
    """List all users."""
    db = ctx.obj["db"]
    service = UserService(db)

    users = service.list_users()
    if not users:
        click.echo("No users found.")
        return

    click.echo(f"{'ID':<5} {'Name':<20} {'Email':<30} {'Budget':>12} {'Alerts':<6}")
    click.echo("-" * 77)
    for u in users:
        alerts = "on" if u.email_notifications else "off"
        click.echo(f"{u.id:<5} {u.name:<20} {u.email:<30} {u.budget:>12,.2f} {alerts:<6}")


@user_group.command("set-budget")
@click.argument("user_id", type=int)
@click.argument("amount")
@click.pass_context
def set_budget(ctx, user_id: int, amount: str):
    """Set the monthly budget of a user."""
    db = ctx.obj["db"]
    service = UserService(db)
    budget_amount = resolve_amount(ctx, amount, "budget")

    try:
        service.set_budget(user_id, budget_amount)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return
    click.echo(f"Budget for user {user_id} set to ${budget_amount:,.2f}")


@user_group.command("notifications")
@click.argument("user_id", type=int)
@click.option("--on/--off", "enabled", required=True, help="Enable or disable budget alert emails")
@click.pass_context
def set_notifications(ctx, user_id: int, enabled: bool):
    """Enable or disable budget alert emails."""
    db = ctx.obj["db"]
    service = UserService(db)

    try:
        service.set_email_notifications(user_id, enabled)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return
    click.echo(f"Email notifications for user {user_id} turned {'on' if enabled else 'off'}")


@user_group.command("update")
@click.argument("user_id", type=int)
@click.option("--name", help="New display name")
@click.option("--email", help="New email address")
@click.pass_context
def update_user(ctx, user_id: int, name: str | None, email: str | None):
    """Change the name or email address of a user."""
    if name is None and email is None:
        click.echo("Error: Nothing to update; pass --name and/or --email", err=True)
        ctx.exit(1)
        return

    db = ctx.obj["db"]
    service = UserService(db)

    try:
        service.update_profile(user_id, name=name, email=email)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return
    click.echo(f"Updated user {user_id}")


@user_group.command("delete")
@click.argument("user_id", type=int)
@click.confirmation_option(prompt="Delete this user and all of their transactions?")
@click.pass_context
def delete_user(ctx, user_id: int):
    """Delete a user and their whole ledger permanently."""
    db = ctx.obj["db"]
    service = UserService(db)

    try:
        removed = service.delete_user(user_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return
    click.echo(f"Deleted user {user_id} and {removed} transaction(s)")


@user_group.command("stats")
@click.argument("user_id", type=int)
@click.option("--as-of", help="Reference date for the account age (defaults to today)")
@click.pass_context
def show_stats(ctx, user_id: int, as_of: str | None):
    """Show lifetime totals and top expense categories of a user."""
    db = ctx.obj["db"]
    service = UserService(db)
    now = resolve_as_of(ctx, as_of)

    try:
        stats = service.get_user_stats(user_id, now)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"Member since {stats.join_date:%Y-%m-%d} ({stats.account_age_days} days)")
    click.echo(f"Transactions: {stats.total_transactions}")
    click.echo(f"  Income:  ${stats.income.total:>12,.2f} ({stats.income.count})")
    click.echo(f"  Expense: ${stats.expense.total:>12,.2f} ({stats.expense.count})")

    if not stats.top_categories:
        return
    click.echo()
    click.echo("Top expense categories:")
    for rollup in stats.top_categories:
        click.echo(f"  {rollup.category.value:<15} ${rollup.total:>12,.2f} ({rollup.count})")


def register_commands(cli):
    """Register user commands with main CLI."""
    cli.add_command(user_group, name="user")
