"""Main CLI entry point for the mushin-form command."""

import logging
from typing import List, Optional

import click
from rich.console import Console
from rich.panel import Panel
from rich.prompt import Confirm, Prompt
from rich.table import Table

from ..app import build_controller, build_places_client
from ..config import get_settings
from ..core.controller import FormController
from ..core.formatting import format_phone_number, normalize_phone_number
from ..core.models import FormStep
from ..core.validation import validate_phone
from ..fields import (
    AddressAutocomplete,
    AddressData,
    Option,
    PhoneInput,
    SelectField,
    TextInput,
    PROPERTY_CONDITION_OPTIONS,
    REFERRAL_SOURCE_OPTIONS,
    TIMEFRAME_OPTIONS,
)
from ..geocoding.places import GooglePlacesClient
from ..storage.snapshot import JsonFileSnapshotStore

console = Console()

STEP_TITLES = {
    FormStep.INITIAL: "Property address & phone",
    FormStep.PROPERTY_DETAILS: "Property condition",
    FormStep.TIMELINE: "Timeline",
    FormStep.CONTACT: "Contact details",
    FormStep.THANK_YOU: "Thank you",
}


@click.group()
@click.version_option(version="1.0.0", prog_name="mushin-form")
def cli():
    """Mushin Buys Houses - get a cash offer for your property.

    \b
    Quick Start:
      mushin-form start            # Fill out (or resume) the offer form
      mushin-form status           # Show saved progress
      mushin-form clear            # Discard saved progress
    """
    logging.basicConfig(
        level=getattr(logging, get_settings().log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )


@cli.command()
def start():
    """Walk through the offer form one step at a time."""
    controller = build_controller()
    places = build_places_client()

    state = controller.form_state
    if state.address or state.phone:
        console.print(f"[dim]Resuming saved form for[/dim] [cyan]{state.address or 'your property'}[/cyan]")
        if state.lead_id:
            # Partial lead already captured; skip straight to the details.
            controller.set_current_step(FormStep.PROPERTY_DETAILS)

    while controller.current_step != FormStep.THANK_YOU:
        step = controller.current_step
        console.rule(f"[bold]{STEP_TITLES[step]}[/bold]")

        if step == FormStep.INITIAL:
            _collect_initial(controller, places)
        elif step == FormStep.PROPERTY_DETAILS:
            _collect_select(controller, "property_condition", "What condition is the property in?",
                            PROPERTY_CONDITION_OPTIONS)
        elif step == FormStep.TIMELINE:
            _collect_select(controller, "timeframe", "How soon would you like to sell?", TIMEFRAME_OPTIONS)
        elif step == FormStep.CONTACT:
            _collect_contact(controller)
            result = controller.submit_form()
            if result.success:
                controller.set_current_step(FormStep.THANK_YOU)
                break
            _show_errors(controller, result.error)
            if not Confirm.ask("Try again?", default=True):
                return
            continue

        transition = controller.advance_step()
        if transition.partial_result and not transition.partial_result.success:
            console.print(f"[yellow]Couldn't save your progress yet:[/yellow] {transition.partial_result.error}")
        if not transition.advanced:
            _show_errors(controller, "Please complete this step: " + ", ".join(transition.missing))

    console.print(Panel.fit(
        "[green]✓ Thanks! Your information has been submitted.[/green]\n\n"
        "We'll call you within 24 hours with a no-obligation cash offer.\n"
        "[dim]No fees, no commissions, no obligation[/dim]",
        title="🏠 Mushin Buys Houses"
    ))


@cli.command()
def status():
    """Show the saved form progress."""
    settings = get_settings()
    snapshot = JsonFileSnapshotStore(settings.snapshot_path).load()
    if not snapshot:
        console.print("[dim]No saved form[/dim]")
        return

    table = Table(title="Saved form")
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    for key, value in snapshot.items():
        if value in ("", None, False) and key not in ("consent",):
            continue
        if key == "phone" and value:
            value = format_phone_number(value)
        table.add_row(key, str(value))
    console.print(table)


@cli.command()
@click.option("--yes", "-y", is_flag=True, help="Don't ask for confirmation")
def clear(yes: bool):
    """Discard the saved form."""
    if not yes and not Confirm.ask("Discard your saved form?", default=False):
        return
    build_controller().clear_form_data()
    console.print("[green]Saved form cleared[/green]")


@cli.command("format-phone")
@click.argument("value")
def format_phone(value: str):
    """Show how a phone number is stored and displayed."""
    normalized = normalize_phone_number(value)
    console.print(f"Stored:    [cyan]{normalized}[/cyan]")
    console.print(f"Displayed: [cyan]{format_phone_number(normalized)}[/cyan]")
    if not validate_phone(normalized):
        console.print("[yellow]Not a valid phone number[/yellow]")


# ============================================================================
# STEP HELPERS
# ============================================================================

def _collect_initial(controller: FormController, places: GooglePlacesClient):
    state = controller.form_state

    if not state.address or not Confirm.ask(f"Use [cyan]{state.address}[/cyan]?", default=True):
        address_input = AddressAutocomplete(
            on_change=lambda address: controller.update_form_data(address.to_form_data()),
            value=state.address,
            required=True
        )
        while not address_input.has_selected:
            _pick_address(address_input, places)
            if address_input.selection_error:
                console.print(f"[red]{address_input.selection_error}[/red]")

    phone_input = PhoneInput(
        on_change=lambda phone: controller.update_form_data({"phone": phone}),
        value=state.phone,
        on_blur=lambda: _check_phone(controller),
        required=True
    )
    while True:
        raw = Prompt.ask("Phone number", default=phone_input.display_value or None)
        phone_input.handle_paste(raw or "")
        phone_input.handle_blur()
        error = controller.errors.get("phone")
        if not error:
            break
        console.print(f"[red]{error}[/red]")

    while True:
        consent = Confirm.ask("I agree to be contacted by Mushin Buys Houses about my property",
                              default=state.consent)
        controller.update_form_data({"consent": consent})
        if consent:
            break
        console.print(f"[red]{controller.errors.get('consent')}[/red]")


def _pick_address(address_input: AddressAutocomplete, places: GooglePlacesClient):
    if not places.enabled:
        address_input.handle_address_select(_manual_address())
        return

    query = Prompt.ask("Property address")
    address_input.handle_input_change(query)
    predictions = places.autocomplete(query)
    if not predictions:
        console.print("[yellow]No matching addresses found[/yellow]")
        address_input.handle_blur()
        return

    for i, prediction in enumerate(predictions, 1):
        console.print(f"  [cyan]{i}[/cyan]. {prediction.description}")
    choice = Prompt.ask("Select your address", choices=[str(i) for i in range(1, len(predictions) + 1)])
    details = places.place_details(predictions[int(choice) - 1].place_id)
    if details is None:
        address_input.handle_blur()
        return
    address_input.handle_address_select(details)


def _manual_address() -> AddressData:
    """Structured entry when no address lookup is configured."""
    street_number = Prompt.ask("Street number")
    street = Prompt.ask("Street name")
    city = Prompt.ask("City")
    state = Prompt.ask("State (2 letters)").upper()
    postal_code = Prompt.ask("ZIP code")
    return AddressData(
        formatted_address=f"{street_number} {street}, {city}, {state} {postal_code}, USA",
        street_number=street_number,
        street=street,
        city=city,
        state=state,
        postal_code=postal_code,
    )


def _check_phone(controller: FormController):
    phone = controller.form_state.phone
    if not phone:
        controller.set_field_error("phone", "Phone number is required")
    elif not validate_phone(phone):
        controller.set_field_error("phone", "Please enter a valid phone number")


def _collect_select(controller: FormController, field: str, question: str, options: List[Option]):
    select = SelectField(
        name=field,
        options=options,
        on_change=lambda value: controller.update_form_data({field: value}),
        value=getattr(controller.form_state, field),
        required=True
    )
    choice = _choose(question, options, select.value)
    select.handle_change(choice)
    if select.selected_description:
        console.print(f"[dim]{select.selected_description}[/dim]")


def _choose(question: str, options: List[Option], current: str = "") -> str:
    default = None
    for i, option in enumerate(options, 1):
        label = option.label
        if option.description:
            label += f" [dim]- {option.description}[/dim]"
        console.print(f"  [cyan]{i}[/cyan]. {label}")
        if option.value == current:
            default = str(i)
    choices = [str(i) for i in range(1, len(options) + 1)]
    if default:
        choice = Prompt.ask(question, choices=choices, default=default)
    else:
        choice = Prompt.ask(question, choices=choices)
    return options[int(choice) - 1].value


def _collect_contact(controller: FormController):
    state = controller.form_state
    for name, label, input_type in (
        ("first_name", "First name", "text"),
        ("last_name", "Last name", "text"),
        ("email", "Email", "email"),
    ):
        text_input = TextInput(
            name=name,
            on_change=lambda value, name=name: controller.update_form_data({name: value.strip()}),
            value=getattr(state, name),
            input_type=input_type,
            required=True,
            max_length=100
        )
        while True:
            text_input.handle_change(Prompt.ask(label, default=text_input.value or None) or "")
            error = controller.errors.get(name)
            if not error:
                break
            console.print(f"[red]{error}[/red]")

    if not state.referral_source and Confirm.ask("Tell us how you heard about us?", default=False):
        controller.update_form_data({"referral_source": _choose("How did you hear about us?", REFERRAL_SOURCE_OPTIONS)})
    comments = Prompt.ask("Anything else we should know? (optional)", default=state.comments or "")
    controller.update_form_data({"comments": comments})


def _show_errors(controller: FormController, message: Optional[str]):
    if message:
        console.print(f"[red]{message}[/red]")
    for field, error in controller.errors.items():
        console.print(f"  [red]•[/red] {field}: {error}")


if __name__ == "__main__":
    cli()
