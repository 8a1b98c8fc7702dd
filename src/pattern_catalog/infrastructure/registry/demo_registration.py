"""Demo Registration - Register every pattern demo with the demo registry."""

from typing import TYPE_CHECKING, Optional

from pattern_catalog.infrastructure.logging.logger import get_logger

if TYPE_CHECKING:
    from pattern_catalog.infrastructure.registry.demo_registry import DemoRegistry


def register_all_demos(registry: Optional['DemoRegistry'] = None) -> int:
    """
    Register all pattern demos with the demo registry.

    Already registered demos are skipped, so calling this more than once is
    safe.

    Args:
        registry: Registry to populate. The singleton registry is used if None.

    Returns:
        Number of demos registered by this call
    """
    from pattern_catalog.domain.patterns.architectural import coordinator_router, mvc, mvvm
    from pattern_catalog.domain.patterns.behavioral import (
        chain_of_responsibility,
        command,
        delegation,
        iterator,
        mediator,
        memento,
        multicast_delegate,
        observer,
        state,
        strategy,
    )
    from pattern_catalog.domain.patterns.creational import builder, factory, prototype, singleton
    from pattern_catalog.domain.patterns.structural import adapter, composite, facade, flyweight
    from pattern_catalog.infrastructure.registry.demo_registry import PatternCategory, get_demo_registry

    if registry is None:
        registry = get_demo_registry()
    logger = get_logger(__name__)

    behavioral = PatternCategory.BEHAVIORAL
    creational = PatternCategory.CREATIONAL
    structural = PatternCategory.STRUCTURAL
    architectural = PatternCategory.ARCHITECTURAL

    demos = [
        dict(name="chain-of-responsibility", title="Chain of Responsibility", category=behavioral,
             summary="Support tickets, log levels and authentication checks handled along a chain",
             runner=chain_of_responsibility.run_demo,
             options={"auth_rate_limit": "auth_rate_limit"}),
        dict(name="command", title="Command", category=behavioral,
             summary="Text editor, smart home remote and file system commands with undo/redo and macros",
             runner=command.run_demo,
             options={"max_history_size": "command_history_limit"}),
        dict(name="memento", title="Memento", category=behavioral,
             summary="Text editor history, game saves and configuration backups restored on demand",
             runner=memento.run_demo,
             options={"text_history_limit": "text_history_limit", "auto_save_limit": "auto_save_limit"}),
        dict(name="strategy", title="Strategy", category=behavioral,
             summary="Interchangeable payment, sorting, pricing and validation algorithms",
             runner=strategy.run_demo),
        dict(name="mediator", title="Mediator", category=behavioral,
             summary="Chat rooms, air traffic control and smart home automation through a hub",
             runner=mediator.run_demo),
        dict(name="observer", title="Observer", category=behavioral,
             summary="News agencies, stock traders, task progress and security events",
             runner=observer.run_demo),
        dict(name="state", title="State", category=behavioral,
             summary="Media player, order lifecycle and game character states",
             runner=state.run_demo,
             publishes_events=True),
        dict(name="multicast-delegate", title="Multicast Delegate", category=behavioral,
             summary="Network status and task progress fanned out to weakly held delegates",
             runner=multicast_delegate.run_demo),
        dict(name="iterator", title="Iterator", category=behavioral,
             summary="Filtered number, tree and matrix traversals",
             runner=iterator.run_demo),
        dict(name="delegation", title="Delegation", category=behavioral,
             summary="File downloads and form validation reporting to a single delegate",
             runner=delegation.run_demo),
        dict(name="factory", title="Factory", category=creational,
             summary="Simple factory, factory method and abstract factory variants",
             runner=factory.run_demo),
        dict(name="singleton", title="Singleton", category=creational,
             summary="Logger, settings, network monitor, cache and database singletons",
             runner=singleton.run_demo,
             options={"cache_max_entries": "cache_max_entries"}),
        dict(name="prototype", title="Prototype", category=creational,
             summary="Cloning game characters, documents and network configurations",
             runner=prototype.run_demo),
        dict(name="builder", title="Builder", category=creational,
             summary="HTTP requests, SQL queries, emails and database configurations built step by step",
             runner=builder.run_demo),
        dict(name="facade", title="Facade", category=structural,
             summary="Home theater, computer start-up and banking behind simple entry points",
             runner=facade.run_demo),
        dict(name="composite", title="Composite", category=structural,
             summary="File systems, organizations, math expressions and menus as uniform trees",
             runner=composite.run_demo),
        dict(name="flyweight", title="Flyweight", category=structural,
             summary="Shared glyphs, particle types and tree types",
             runner=flyweight.run_demo,
             seeded=True),
        dict(name="adapter", title="Adapter", category=structural,
             summary="Media players, payment gateways and data formats behind common interfaces",
             runner=adapter.run_demo),
        dict(name="mvc", title="Model-View-Controller", category=architectural,
             summary="A controller mediating between a user model and its view",
             runner=mvc.run_demo),
        dict(name="mvvm", title="Model-View-ViewModel", category=architectural,
             summary="User list, product catalog and plant collection view models",
             runner=mvvm.run_demo),
        dict(name="coordinator-router", title="Coordinator with Router", category=architectural,
             summary="Navigation flows, tabs and deep links owned by coordinators",
             runner=coordinator_router.run_demo),
    ]

    registered = 0
    for demo in demos:
        if registry.is_registered(demo["name"]):
            continue
        registry.register(**demo)
        registered += 1

    logger.debug("Pattern demos registered", registered=registered, total=len(demos))
    return registered
