from designpatterns.flyweight import (
    ImageFlyweightFactory,
    ImageViewer,
    get_image_flyweight_factory,
)


def test_viewer_display(capsys):
    viewer = ImageViewer("image1.png")
    viewer.display()
    assert capsys.readouterr().out == "Display: image data image1.png\n"


def test_viewers_share_image():
    viewer1 = ImageViewer("image1.png")
    viewer2 = ImageViewer("image1.png")
    assert viewer1.image is viewer2.image


def test_different_files_get_different_images():
    viewer1 = ImageViewer("a.png")
    viewer2 = ImageViewer("b.png")
    assert viewer1.image is not viewer2.image
    assert viewer2.data == "image data b.png"


def test_factory_is_shared():
    first = get_image_flyweight_factory().get("shared.png")
    second = get_image_flyweight_factory().get("shared.png")
    assert id(first) == id(second)
    assert second.data == "image data shared.png"


def test_factory_get_caches():
    factory = ImageFlyweightFactory()
    first = factory.get("x.png")
    assert factory.get("x.png") is first
    assert first.data == "image data x.png"