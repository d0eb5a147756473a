# mage

A compact game engine core in plain Python. It provides:

- **Vector maths**: `Vector2f`, `Vector2i`, `Vector3f` and `Vector3i` with
  length, normalisation, dot and cross products, angles in degrees and
  reflection (`mage.vectors`), and a 4×4 `Matrix4f` with translate, scale and
  rotation about the x, y or z axis (`mage.matrix`).
- **Transform helpers**: `identity`, `translate`, `rotate`, `scale`,
  `perspective` and `look_at` on numpy 4×4 arrays (`mage.glmath`).
- **Entities and components**: an `Entity` holds components such as
  `Transform`, `Camera`, `RigidBody`, `SphereCollider`, `BoxCollider`,
  `PlaneCollider`, `PointLight`, `SpotLight`, `Mesh` and `RemoteClient`
  (`mage.entity`, `mage.components`, `mage.transform`).
- **Physics**: gravity, velocity damping, sphere/box/plane collision detection
  and a bounce response (`mage.physics`).
- **Input**: named buttons and axes driven by a key-state callback and by
  cursor motion (`mage.input`).
- **Geometry**: square, box and UV-sphere mesh generation and a name-keyed
  `MeshLibrary` (`mage.meshgen`), and a Wavefront OBJ reader
  (`mage.objloader`).
- **Messages**: a fixed little-endian binary format for connect, disconnect
  and position-update messages (`mage.messages`).

## Installation

```
pip install .
```

For running the test suite:

```
pip install ".[test]"
pytest
```

## Using the library

```python
from mage.vectors import Vector3f
from mage.matrix import Matrix4f

a = Vector3f(1, 0, 0)
b = Vector3f(0, 1, 0)
print(a.cross(b))            # the unit z vector
print(a.angle_between(b))    # 90.0

m = Matrix4f.identity()
m.translate(Vector3f(1, 2, 3))
```

Entities are built by adding component classes and reading them back:

```python
from mage.entity import Entity
from mage.transform import Transform
from mage.components import SphereCollider

ball = Entity(True)
ball.add_component(Transform)
ball.add_component(SphereCollider)
ball.get_component(Transform).position = Vector3f(0, 2, 0)
print(ball.collider())       # ColliderType.SPHERE
```

`Physics` works on any world object that has `physics`, `world_up` and
`entities` attributes; a `RigidBody` component calls it from its `update`:

```python
from types import SimpleNamespace
from mage.physics import Physics
from mage.components import RigidBody

world = SimpleNamespace(physics=Physics(), world_up=Vector3f(0, 1, 0), entities=[ball])
ball.add_component(RigidBody)
ball.update(world)           # gravity pulls the ball down a little
```

Messages are packed to bytes and decoded back into `Message` or
`TransformUpdateMessage` objects:

```python
from mage.messages import Message, MessageType, decode

data = Message(MessageType.CONNECT, 3).pack()
print(decode(data))
```

Meshes come out as plain vertex and index lists, with numpy arrays on request:

```python
from mage.meshgen import box_mesh
from mage.objloader import load_obj

mesh = box_mesh(-1, 1, 0, 1)
print(len(mesh.vertices), len(mesh.indices))   # 24 36
print(mesh.vertex_array().shape)               # (24, 11)
```

## What this package does not do

- It opens no window and draws nothing. `Mesh.update` hands the mesh and its
  model matrix to `draw_3d` or `draw_2d` on the world object you supply;
  putting pixels on a screen is up to that object.
- It has no network connection code. `mage.messages` only packs and decodes
  the bytes; there is no server or client that sends them.
- It installs no command-line program and has no ready-made game loop or demo
  scene; you build the world object and call the updates yourself.