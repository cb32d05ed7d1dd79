import numpy as np

from austere.color import Color
from austere.lights import DirectionalLight, LightType, PointLight, SpotLight


class RecordingShader:
    def __init__(self):
        self.uniforms = {}

    def set_int(self, name, value):
        self.uniforms[name] = value

    def set_float(self, name, value):
        self.uniforms[name] = value

    def set_bool(self, name, value):
        self.uniforms[name] = value

    def set_vec3(self, name, value):
        self.uniforms[name] = np.asarray(value)


def test_light_types():
    assert DirectionalLight().light_type is LightType.DIRECTIONAL
    assert PointLight().light_type is LightType.POINT
    assert SpotLight().light_type is LightType.SPOT


def test_enabled_is_keyword_with_default_true():
    assert DirectionalLight().enabled is True
    assert PointLight(enabled=False).enabled is False


def test_directional_apply_writes_prefixed_uniforms():
    shader = RecordingShader()
    light = DirectionalLight(Color.RED, 0.5, (1.0, 2.0, 3.0))
    light.apply(shader, "u_DirLights", 2)
    assert set(shader.uniforms) == {
        "u_DirLights[2].color",
        "u_DirLights[2].intensity",
        "u_DirLights[2].direction",
    }
    assert np.array_equal(shader.uniforms["u_DirLights[2].color"], Color.RED.to_vec3())
    assert shader.uniforms["u_DirLights[2].intensity"] == 0.5
    assert np.array_equal(shader.uniforms["u_DirLights[2].direction"], [1.0, 2.0, 3.0])


def test_apply_with_empty_uniform_name_writes_nothing():
    shader = RecordingShader()
    DirectionalLight().apply(shader, "", 0)
    PointLight().apply(shader, "", 0)
    assert shader.uniforms == {}


def test_point_apply_writes_attenuation():
    shader = RecordingShader()
    light = PointLight(Color.BLUE, 2.0, (4.0, 5.0, 6.0), 1.5, 0.25, 0.125)
    light.apply(shader, "u_PointLights", 0)
    p = "u_PointLights[0]"
    assert np.array_equal(shader.uniforms[f"{p}.position"], [4.0, 5.0, 6.0])
    assert shader.uniforms[f"{p}.constant"] == 1.5
    assert shader.uniforms[f"{p}.linear"] == 0.25
    assert shader.uniforms[f"{p}.quadratic"] == 0.125
    assert len(shader.uniforms) == 6


def test_spot_apply_writes_all_fields():
    shader = RecordingShader()
    light = SpotLight(
        Color.GREEN, 1.0, (0.0, 1.0, 0.0), (0.0, -1.0, 0.0), 0.9, 0.8, 1.0, 0.5, 0.25
    )
    light.apply(shader, "u_SpotLights", 1)
    p = "u_SpotLights[1]"
    assert set(shader.uniforms) == {
        f"{p}.{suffix}"
        for suffix in (
            "color", "intensity", "position", "direction", "innerCutoff",
            "outerCutoff", "constant", "linear", "quadratic",
        )
    }
    assert shader.uniforms[f"{p}.innerCutoff"] == 0.9
    assert shader.uniforms[f"{p}.outerCutoff"] == 0.8
    assert np.array_equal(shader.uniforms[f"{p}.direction"], [0.0, -1.0, 0.0])


def test_vectors_are_converted_to_arrays():
    light = SpotLight(position=[1, 2, 3])
    assert light.position.shape == (3,)
    assert light.position.dtype == float