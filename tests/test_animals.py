from algocorner.animals import Animal, Dog, Pig


def test_animal_sound():
    assert Animal().sound() == "The animal makes a sound"


def test_pig_sound():
    assert Pig().sound() == "The pig says: wee wee"


def test_dog_sound():
    assert Dog().sound() == "The dog says: bow wow"


def test_dispatch_through_base_class():
    animals: list[Animal] = [Animal(), Pig(), Dog()]
    sounds = [animal.sound() for animal in animals]
    assert sounds == [
        "The animal makes a sound",
        "The pig says: wee wee",
        "The dog says: bow wow",
    ]
    assert len(set(sounds)) == 3