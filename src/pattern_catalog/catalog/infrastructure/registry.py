"""Catalog registry — builds the PatternCatalog, wiring configurable demonstrations."""

from pattern_catalog.catalog.domain.catalog import PatternCatalog
from pattern_catalog.config.domain.config import CatalogConfig
from pattern_catalog.patterns.behavioral.chain_of_responsibility import (
    ChainOfResponsibilityDemonstration,
)
from pattern_catalog.patterns.behavioral.command import CommandDemonstration
from pattern_catalog.patterns.behavioral.iterator import IteratorDemonstration
from pattern_catalog.patterns.behavioral.mediator import MediatorDemonstration
from pattern_catalog.patterns.behavioral.memento import MementoDemonstration
from pattern_catalog.patterns.behavioral.observer import ObserverDemonstration
from pattern_catalog.patterns.behavioral.state import StateDemonstration
from pattern_catalog.patterns.behavioral.strategy import StrategyDemonstration
from pattern_catalog.patterns.behavioral.template_method import (
    TemplateMethodDemonstration,
)
from pattern_catalog.patterns.behavioral.visitor import VisitorDemonstration
from pattern_catalog.patterns.creational.abstract_factory import (
    AbstractFactoryDemonstration,
)
from pattern_catalog.patterns.creational.builder import BuilderDemonstration
from pattern_catalog.patterns.creational.factory_method import (
    FactoryMethodDemonstration,
)
from pattern_catalog.patterns.creational.prototype import PrototypeDemonstration
from pattern_catalog.patterns.creational.singleton import SingletonDemonstration
from pattern_catalog.patterns.structural.adapter import AdapterDemonstration
from pattern_catalog.patterns.structural.bridge import BridgeDemonstration
from pattern_catalog.patterns.structural.composite import CompositeDemonstration
from pattern_catalog.patterns.structural.decorator import DecoratorDemonstration
from pattern_catalog.patterns.structural.facade import FacadeDemonstration
from pattern_catalog.patterns.structural.flyweight import FlyweightDemonstration
from pattern_catalog.patterns.structural.proxy import ProxyDemonstration


def create_catalog(config: CatalogConfig) -> PatternCatalog:
    """Return a PatternCatalog holding one demonstration per known pattern."""
    return PatternCatalog(
        demonstrations=[
            ChainOfResponsibilityDemonstration(
                handlers=config.chain_of_responsibility.handlers
            ),
            CommandDemonstration(),
            IteratorDemonstration(),
            MediatorDemonstration(participants=config.mediator.participants),
            MementoDemonstration(),
            ObserverDemonstration(subscribers=config.observer.subscribers),
            StateDemonstration(),
            StrategyDemonstration(),
            TemplateMethodDemonstration(),
            VisitorDemonstration(),
            AbstractFactoryDemonstration(),
            BuilderDemonstration(),
            FactoryMethodDemonstration(),
            PrototypeDemonstration(),
            SingletonDemonstration(context=config.context),
            AdapterDemonstration(),
            BridgeDemonstration(),
            CompositeDemonstration(),
            DecoratorDemonstration(),
            FacadeDemonstration(),
            FlyweightDemonstration(),
            ProxyDemonstration(),
        ]
    )
