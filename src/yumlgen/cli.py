import click
import importlib
import json
import logging
from functools import wraps
from yumlgen import __version__
from yumlgen.diagram_model import DetailLevel, DiagramType, Direction, Scale
from yumlgen.introspection import classes_in_module
from yumlgen.utils import load_config, import_type, LogFormatter
from yumlgen.yuml_factory import YumlFactory

log = logging.getLogger(__name__)


def setup_command(func):
    """Decorator to handle common CLI setup (logging, config loading, version)."""

    @wraps(func)
    def wrapper(config, debug, version=None, **kwargs):
        # Handle --version flag
        if version is not None and version:
            click.echo(__version__)
            return

        # Setup logging
        log_handler = logging.StreamHandler()
        log_handler.setFormatter(LogFormatter())
        logging.basicConfig(level=logging.DEBUG if debug else logging.WARNING, handlers=[log_handler], force=True)

        # Load config
        config_obj = load_config(config)
        if debug:
            log.debug(json.dumps(config_obj.model_dump(mode="json"), indent=4))

        # Call actual command with config_obj
        return func(config_obj=config_obj, debug=debug, **kwargs)

    return wrapper


def diagram_options(func):
    """Options shared by commands that draw a diagram."""
    options = [
        click.argument("types", nargs=-1),
        click.option("--config", default=None, help="Configuration file (YAML or JSON)."),
        click.option("--debug", default=False, is_flag=True, help="Enable debug."),
        click.option("--version", is_flag=True, help="Show the application's version."),
        click.option("--module", "modules", multiple=True, help="Add all classes defined in a module."),
        click.option(
            "--detail",
            multiple=True,
            type=click.Choice([level.value for level in DetailLevel]),
            help="Members to show, may be repeated (default: from configuration).",
        ),
        click.option("--type", "diagram_type", type=click.Choice([t.value for t in DiagramType]), default=None),
        click.option("--direction", type=click.Choice([d.value for d in Direction]), default=None),
        click.option("--scale", type=click.Choice([s.name.lower() for s in Scale]), default=None),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def collect_types(types, modules):
    """Import classes given as ``module:Class`` paths and all classes of given modules."""
    result = []
    for path in types:
        try:
            result.append(import_type(path))
        except (ImportError, AttributeError, TypeError) as e:
            raise click.BadParameter(f"Cannot load type '{path}': {e}", param_hint="TYPES")
    for module_name in modules:
        try:
            module = importlib.import_module(module_name)
        except ImportError as e:
            raise click.BadParameter(f"Cannot import module '{module_name}': {e}", param_hint="--module")
        result.extend(classes_in_module(module))
    return result


def make_factory(config_obj, types, modules, diagram_type, direction, scale):
    if diagram_type is not None:
        config_obj.style.diagram_type = DiagramType(diagram_type)
    if direction is not None:
        config_obj.style.direction = Direction(direction)
    if scale is not None:
        config_obj.style.scale = Scale[scale.upper()]
    return YumlFactory(collect_types(types, modules), config=config_obj)


@click.group()
def cli():
    pass


@click.command()
@diagram_options
@setup_command
def fragment(config_obj, debug, types, modules, detail, diagram_type, direction, scale):
    """Print yUML class diagram DSL for Python classes."""
    factory = make_factory(config_obj, types, modules, diagram_type, direction, scale)
    click.echo(factory.generate_class_diagram_fragment(*detail))


@click.command()
@diagram_options
@setup_command
def uri(config_obj, debug, types, modules, detail, diagram_type, direction, scale):
    """Render a class diagram with yUML and print its URL."""
    factory = make_factory(config_obj, types, modules, diagram_type, direction, scale)
    click.echo(factory.generate_class_diagram_uri(*detail))


cli.add_command(fragment)
cli.add_command(uri)

if __name__ == "__main__":
    cli()
