from designpatterns.command import Box, MotherBoard, RebootCommand, StartCommand


def test_command_example(capsys):
    mb = MotherBoard()
    start = StartCommand(mb)
    reboot = RebootCommand(mb)

    box1 = Box(start, reboot)
    box1.press_button1()
    box1.press_button2()

    box2 = Box(reboot, start)
    box2.press_button1()
    box2.press_button2()

    assert capsys.readouterr().out == (
        "system starting\n"
        "system rebooting\n"
        "system rebooting\n"
        "system starting\n"
    )


def test_single_command(capsys):
    StartCommand(MotherBoard()).execute()
    assert capsys.readouterr().out == "system starting\n"