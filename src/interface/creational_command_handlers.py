"""Creational pattern demos for the interface layer."""
from __future__ import annotations

import re
from typing import List

from src.domain.creational.abstract_factory import select_factory
from src.domain.creational.builder import Coffee
from src.domain.creational.factory_method import CoffeeMachineFactory
from src.domain.creational.prototype import CoffeeMachineManager
from src.domain.creational.singleton import GlobalCoffeeConfig
from src.interface.command_handlers import DemoCommandHandler, yes_no

ABSTRACT_FACTORY_PROMPT = "Enter coffee type (simple:1 / espresso:2): "
LEADING_INTEGER = re.compile(r"\s*([+-]?\d+)")

DEFAULT_MACHINE_TYPES = (1, 2, 3, 99)


class AbstractFactoryDemoHandler(DemoCommandHandler):
    """Asks for a coffee type, then brews with the matching product family."""

    pattern_name = "abstract-factory"

    def run(self) -> int:
        choice = self.option("choice")
        if choice is None:
            choice = self._prompt_choice()
            if choice is None:
                self.echo("Invalid input!")
                return 1

        factory = select_factory(choice)
        if factory is None:
            self.echo("Invalid choice!")
            return 1

        coffee_machine = factory.create_coffee_machine()
        coffee = factory.create_coffee()
        self.echo(coffee_machine.brew(), coffee.prepare())
        return 0

    def _prompt_choice(self):
        stdout = self.context.stdout
        stdout.write(ABSTRACT_FACTORY_PROMPT)
        stdout.flush()
        answer = self.context.stdin.readline()
        # Only the leading integer is read; trailing text is ignored
        match = LEADING_INTEGER.match(answer)
        if match is None:
            self.logger.debug("Rejected coffee type input", answer=answer.strip())
            return None
        return int(match.group(1))


class BuilderDemoHandler(DemoCommandHandler):
    """Builds three coffees, reusing one builder for the last two."""

    pattern_name = "builder"

    def run(self) -> int:
        coffee = Coffee.create("John Doe").make_hot().add_milk().costs(5.0).build()
        self.echo_lines(self._details(coffee))

        builder = Coffee.create("Kevin Smith")
        cold_coffee = builder.make_cold().remove_sugar().costs(4.0).build()
        self.echo("")
        self.echo_lines(self._details(cold_coffee))

        builder.reset("Alice").make_hot().add_milk().add_sugar().costs(6.0).set_requestor_name("Alice Smith")
        alice_coffee = builder.build()
        self.echo("", alice_coffee.description)
        return 0

    @staticmethod
    def _details(coffee: Coffee) -> List[str]:
        return [
            coffee.description,
            f"Is hot: {yes_no(coffee.is_hot)}",
            f"Has milk: {yes_no(coffee.has_milk)}",
            f"Has sugar: {yes_no(coffee.has_sugar)}",
            f"Cost: ${coffee.cost:g}",
        ]


class FactoryMethodDemoHandler(DemoCommandHandler):
    """Creates machines by numeric type, checking for unknown types."""

    pattern_name = "factory-method"

    def run(self) -> int:
        machine_type = self.option("machine_type")
        if machine_type is not None:
            machine = CoffeeMachineFactory.create_machine(machine_type)
            if machine is None:
                self.echo("Unknown machine type could not be created.")
                return 1
            self.echo(machine.brew())
            return 0

        machines = [CoffeeMachineFactory.create_machine(t) for t in DEFAULT_MACHINE_TYPES]
        for machine in machines:
            if machine is not None:
                self.echo(machine.brew())
        if any(machine is None for machine in machines):
            self.echo("Unknown machine type could not be created.")
        return 0


class SingletonDemoHandler(DemoCommandHandler):
    """Walks through the shared coffee configuration store."""

    pattern_name = "singleton"

    def run(self) -> int:
        config = GlobalCoffeeConfig.get_instance(self.context.singletons)
        config2 = GlobalCoffeeConfig.get_instance(self.context.singletons)
        self.echo(f"config and config2 are the same instance: {yes_no(config is config2)}")

        config.set_state("coffeeType", "Espresso")
        config.set_state("milk", "Almond")
        config.set_state("sugar", "Brown")

        self.echo("Current Coffee Config:")
        self.echo_lines(config.state_lines())

        self.echo(
            f"Has milk: {yes_no(config.has_state('milk'))}",
            f"Sugar: {config.get_state_or_default('sugar', 'None')}",
            f"Coffee Type: {config.get_state('coffeeType')}",
        )

        removed_sugar = config.get_state("sugar")
        config.remove_state("sugar")
        self.echo(f"Removed sugar: {removed_sugar}", "After removing sugar:")
        self.echo_lines(config.state_lines())

        config.clear_state()
        self.echo("After clearing all settings:")
        self.echo_lines(config.state_lines())

        self.echo(
            f"Has milk after clear: {yes_no(config.has_state('milk'))}",
            f"Milk (default): {config.get_state_or_default('milk', 'None')}",
        )
        return 0


class PrototypeDemoHandler(DemoCommandHandler):
    """Clones the three exemplar machines, customizes and brews them."""

    pattern_name = "prototype"

    def run(self) -> int:
        manager = CoffeeMachineManager()
        simple_machine = manager.create_machine(0)
        espresso_machine = manager.create_machine(1)
        advanced_machine = manager.create_machine(2)

        if simple_machine is None or espresso_machine is None or advanced_machine is None:
            self.warn("Failed to create coffee machines.")
            return 1

        simple_machine.set_cup_size(2)
        simple_machine.set_milk(True)
        simple_machine.set_sugar(1)

        espresso_machine.set_cup_size(1)
        espresso_machine.set_milk(False)
        espresso_machine.set_sugar(0)

        advanced_machine.set_cup_size(3)
        advanced_machine.set_milk(True)
        advanced_machine.set_sugar(3)

        for machine in (simple_machine, espresso_machine, advanced_machine):
            self.echo_lines(machine.brew())

        cloned_machine = simple_machine.clone()
        cloned_machine.set_cup_size(1)
        cloned_machine.set_milk(False)
        cloned_machine.set_sugar(0)
        self.echo("Cloned and customized SimpleCoffeeMachine:")
        self.echo_lines(cloned_machine.brew())
        return 0
