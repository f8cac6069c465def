"""Registration of every demo in the pattern catalog."""

from src.infrastructure.registry.pattern_registry import PatternCategory, PatternRegistry
from src.interface.creational_command_handlers import (
    AbstractFactoryDemoHandler,
    BuilderDemoHandler,
    FactoryMethodDemoHandler,
    PrototypeDemoHandler,
    SingletonDemoHandler,
)
from src.interface.structural_command_handlers import (
    AdapterDemoHandler,
    BridgeDemoHandler,
    CompositeDemoHandler,
    DecoratorDemoHandler,
    FacadeDemoHandler,
    FlyweightDemoHandler,
    ProxyDemoHandler,
)

CREATIONAL = PatternCategory.CREATIONAL
STRUCTURAL = PatternCategory.STRUCTURAL

# name, category, summary, handler class, domain module, interactive
PATTERN_CATALOG = (
    ("abstract-factory", CREATIONAL,
     "Pairs of related product families selected by one factory",
     AbstractFactoryDemoHandler, "src.domain.creational.abstract_factory", True),
    ("builder", CREATIONAL,
     "Stepwise, chainable construction of a value object with post-build validation",
     BuilderDemoHandler, "src.domain.creational.builder", False),
    ("factory-method", CREATIONAL,
     "Single creation function switching on an integer tag",
     FactoryMethodDemoHandler, "src.domain.creational.factory_method", False),
    ("singleton", CREATIONAL,
     "One shared key/value store per application context",
     SingletonDemoHandler, "src.domain.creational.singleton", False),
    ("prototype", CREATIONAL,
     "A small registry of exemplar objects cloned on demand",
     PrototypeDemoHandler, "src.domain.creational.prototype", False),
    ("adapter", STRUCTURAL,
     "Interface translation between two incompatible interfaces",
     AdapterDemoHandler, "src.domain.structural.adapter", False),
    ("bridge", STRUCTURAL,
     "Remote abstractions varying independently of device implementations",
     BridgeDemoHandler, "src.domain.structural.bridge", False),
    ("composite", STRUCTURAL,
     "Recursive tree of uniform leaf and container nodes",
     CompositeDemoHandler, "src.domain.structural.composite", False),
    ("decorator", STRUCTURAL,
     "Chain of wrappers each adding one feature and its cost",
     DecoratorDemoHandler, "src.domain.structural.decorator", False),
    ("facade", STRUCTURAL,
     "One object sequencing calls to several subsystems",
     FacadeDemoHandler, "src.domain.structural.facade", False),
    ("flyweight", STRUCTURAL,
     "Cache of shared intrinsic state reused on repeat keys",
     FlyweightDemoHandler, "src.domain.structural.flyweight", False),
    ("proxy", STRUCTURAL,
     "Access-control wrapper gating a real object behind a shared secret",
     ProxyDemoHandler, "src.domain.structural.proxy", False),
)


def register_all_patterns(registry: PatternRegistry) -> PatternRegistry:
    """Register the twelve demos in catalog order."""
    for name, category, summary, handler_class, module, interactive in PATTERN_CATALOG:
        registry.register_pattern(
            name,
            category,
            summary,
            handler_class,
            interactive=interactive,
            module=module,
        )
    return registry
