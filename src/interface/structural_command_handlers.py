"""Structural pattern demos for the interface layer."""
from __future__ import annotations

from src.domain.structural.adapter import EuropeanPlug, PlugAdapter
from src.domain.structural.bridge import TV, AdvancedRemote, BasicRemote, Radio
from src.domain.structural.composite import Directory, File
from src.domain.structural.decorator import (
    MilkDecorator,
    SimpleCoffee,
    SugarDecorator,
    WhippedCreamDecorator,
)
from src.domain.structural.facade import HomeTheaterFacade
from src.domain.structural.flyweight import CarFlyweightFactory
from src.domain.structural.proxy import BankAccountProxy
from src.interface.command_handlers import DemoCommandHandler

FLYWEIGHT_REQUESTS = (
    ("Model S", "Tesla", "Electric", "TS1234", "Alice"),
    ("Model S", "Tesla", "Electric", "TS5678", "Bob"),
    ("Mustang", "Ford", "Gasoline", "FD1234", "Charlie"),
)


class AdapterDemoHandler(DemoCommandHandler):
    pattern_name = "adapter"

    def run(self) -> int:
        adapter = PlugAdapter(EuropeanPlug())
        self.echo("Using European plug in an American socket.")
        self.echo_lines(adapter.provide_power())

        empty_adapter = PlugAdapter(None)
        self.echo("", "Trying to use adapter with no plug:")
        self.echo_lines(empty_adapter.provide_power())
        return 0


class BridgeDemoHandler(DemoCommandHandler):
    pattern_name = "bridge"

    def run(self) -> int:
        tv = TV()
        radio = Radio()

        self.echo("Using Basic Remote for TV:")
        self.echo_lines(BasicRemote(tv).press_power_button())

        advanced_remote_for_radio = AdvancedRemote(radio)
        self.echo("Using Advanced Remote for Radio:")
        self.echo_lines(advanced_remote_for_radio.press_power_button())
        self.echo_lines(advanced_remote_for_radio.press_power_off_button())

        advanced_remote_for_tv = AdvancedRemote(tv)
        self.echo("Using Advanced Remote for TV:")
        self.echo_lines(advanced_remote_for_tv.press_power_button())
        self.echo_lines(advanced_remote_for_tv.press_power_off_button())
        return 0


class CompositeDemoHandler(DemoCommandHandler):
    pattern_name = "composite"

    def run(self) -> int:
        document = File("Document.txt")
        photo = File("Photo.jpg")
        presentation = File("Presentation.pptx")

        documents = Directory("Documents")
        photos = Directory("Photos")
        root = Directory("Root")

        documents.add(document)
        photos.add(photo)
        photos.add(presentation)
        root.add(documents)
        root.add(photos)

        self.echo("Filesystem Structure:")
        self.echo_lines(root.show_details())
        self.echo("")

        photos.remove(photo)
        self.echo("Updated Filesystem Structure after removing Photo.jpg:")
        self.echo_lines(root.show_details())
        self.echo("")

        root.add(File("Readme.txt"))
        self.echo("Updated Filesystem Structure after adding Readme.txt:")
        self.echo_lines(root.show_details())
        self.echo("")
        return 0


class DecoratorDemoHandler(DemoCommandHandler):
    pattern_name = "decorator"

    def run(self) -> int:
        my_coffee = SimpleCoffee()
        my_coffee = MilkDecorator(my_coffee)
        my_coffee = SugarDecorator(my_coffee)
        my_coffee = WhippedCreamDecorator(my_coffee)

        self.echo(
            f"Description: {my_coffee.get_description()}",
            f"Total Cost: ${my_coffee.cost():g}",
        )
        return 0


class FacadeDemoHandler(DemoCommandHandler):
    pattern_name = "facade"

    def run(self) -> int:
        settings = self.context.config.demos.facade
        home_theater = HomeTheaterFacade(volume=settings.volume)

        self.echo_lines(home_theater.watch_movie(settings.movie))
        self.echo("Enjoy the movie!")

        self.echo_lines(home_theater.end_movie())
        self.echo("Movie ended. Home theater is now off.")
        return 0


class FlyweightDemoHandler(DemoCommandHandler):
    pattern_name = "flyweight"

    def run(self) -> int:
        factory = CarFlyweightFactory()
        for model, brand, engine_type, registration_number, owner in FLYWEIGHT_REQUESTS:
            car, created = factory.get_or_create(model, brand, engine_type)
            action = "Creating new" if created else "Reusing existing"
            self.echo(f"{action} CarFlyweight: {factory.generate_key(model, brand, engine_type)}")
            self.echo(car.display_car_details(registration_number, owner))
        return 0


class ProxyDemoHandler(DemoCommandHandler):
    pattern_name = "proxy"

    def run(self) -> int:
        settings = self.context.config.demos.proxy
        pin = settings.pin
        account = BankAccountProxy(settings.initial_balance, pin)

        self.echo(account.deposit(50.0, pin).message)
        self.echo(f"Current Balance: {account.get_balance(pin).balance:g}")

        self.echo(account.withdraw(30.0, pin).message)
        self.echo(f"Current Balance: {account.get_balance(pin).balance:g}")

        # Insufficient balance
        self.echo(account.withdraw(150.0, pin).message)

        self.echo("Attempting to get balance with wrong pin:")
        wrong_pin = f"not-{pin}"
        self.echo(account.deposit(20.0, wrong_pin).message)
        refused = account.get_balance(wrong_pin)
        self.echo(refused.message, f"Balance with wrong pin: {refused.balance:g}")
        return 0
