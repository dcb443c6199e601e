import logging
import matplotlib.pyplot as plt

from ntrace.math.vector import Vector3
from ntrace.math.color import Color
from ntrace.scene.scene import Scene
from ntrace.element.shape import Sphere
from ntrace.element.material import DiffuseMaterial, FlatColorMaterial, MirrorMaterial
from ntrace.detector.camera import RegularCamera
from ntrace.detector.renderer import Renderer
from ntrace.config import RenderConfig


scene = Scene(log_level=logging.INFO)

scene += Sphere(Vector3(-2, -3, 7), 2, MirrorMaterial())
scene += Sphere(Vector3(0, 100, 5), 90.2, FlatColorMaterial(Color.brightness(5)))

# walls, floor, ceiling and back of the box
pale_red = Color(0.75, 0.25, 0.25)
pale_blue = Color(0.25, 0.25, 0.75)
walls = [
    (Vector3(-1000, 0, 0), pale_red),
    (Vector3(1000, 0, 0), pale_blue),
    (Vector3(0, -1000, 5), Color.WHITE),
    (Vector3(0, 1000, 5), Color.WHITE),
    (Vector3(0, 0, 1005), Color.WHITE),
]
for center, color in walls:
    scene += Sphere(center, 990, DiffuseMaterial(color))

camera = RegularCamera(scene, background_color=Color.BLACK, bounces=5)

renderer = Renderer(RenderConfig(width=64, height=64, samples=20, snapshot_interval=2.0))
buffer = renderer.render(camera, on_snapshot=lambda snapshot: print(f"snapshot. complete={snapshot.complete}"))

print(f"runtime: {renderer.elapsed_time()}")

buffer.to_image().save("render.png")
plt.imshow(buffer.to_rgba8())
plt.show(block=True)
