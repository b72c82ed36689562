from mjengine.enums import ComponentType, LayerType, ResourceType


def test_component_types_precede_end():
    end = ComponentType(len(ComponentType) - 1)
    assert end is ComponentType.END
    members = [m for m in ComponentType if m is not end]
    assert all(m < end for m in members)
    assert end == len(members)


def test_component_type_order():
    assert ComponentType(0) is ComponentType.TRANSFORM
    assert ComponentType(1) is ComponentType.SPRITE_RENDERER
    assert ComponentType(2) is ComponentType.ANIMATOR
    assert ComponentType(3) is ComponentType.SCRIPT
    assert ComponentType(4) is ComponentType.CAMERA


def test_layer_count():
    assert LayerType(16) is LayerType.MAX
    assert LayerType(0) is LayerType.NONE


def test_layers_fit_within_max():
    assert all(layer <= LayerType(16) for layer in LayerType)
    assert LayerType(1) is LayerType.BACKGROUND
    assert LayerType(2) is LayerType.PLAYER
    assert LayerType(3) is LayerType.ANIMAL
    assert LayerType(4) is LayerType.PARTICLE


def test_resource_types_precede_end():
    end = ResourceType(len(ResourceType) - 1)
    assert end is ResourceType.END
    assert ResourceType(0) is ResourceType.TEXTURE
    assert ResourceType(2) is ResourceType.ANIMATION