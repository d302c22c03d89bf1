from algokit.vending import Application, VendingMachine


def test_get_drink_message():
    assert VendingMachine().get_drink("coke") == "Enjoy your coke"


def test_get_drink_uses_brand():
    assert VendingMachine().get_drink("tea").endswith("tea")


def test_run_prints_and_returns(capsys):
    result = Application(VendingMachine()).run()
    assert result == "Enjoy your coke"
    assert capsys.readouterr().out == "Enjoy your coke\n"


def test_run_with_other_machine(capsys):
    class EchoMachine:
        def get_drink(self, brand):
            return brand.upper()

    assert Application(EchoMachine()).run() == "COKE"
    assert capsys.readouterr().out.strip() == "COKE"


def test_default_machine():
    assert Application().run() == VendingMachine().get_drink("coke")