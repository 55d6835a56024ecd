"""Triangle mesh container with OBJ export."""

from dataclasses import dataclass, field

from odrkit.vecmath import Vec2D, Vec3D


@dataclass
class Mesh3D:
    """Indexed triangle mesh with optional normals and texture coordinates."""

    vertices: list[Vec3D] = field(default_factory=list)
    indices: list[int] = field(default_factory=list)
    normals: list[Vec3D] = field(default_factory=list)
    st_coordinates: list[Vec2D] = field(default_factory=list)

    def add_mesh(self, other: "Mesh3D") -> None:
        """Append ``other``, shifting its indices past this mesh's vertices."""
        offset = len(self.vertices)
        self.vertices.extend(other.vertices)
        self.normals.extend(other.normals)
        self.st_coordinates.extend(other.st_coordinates)
        self.indices.extend(idx + offset for idx in other.indices)

    def get_obj(self) -> str:
        """Render the mesh as Wavefront OBJ text."""
        if len(self.indices) % 3:
            raise ValueError("index count is not a multiple of three")
        lines = [f"v {x:g} {y:g} {z:g}" for x, y, z in self.vertices]
        lines += [f"vn {x:g} {y:g} {z:g}" for x, y, z in self.normals]
        with_normals = len(self.normals) == len(self.vertices)
        triples = zip(*[iter(self.indices)] * 3)
        for tri in triples:
            i1, i2, i3 = (i + 1 for i in tri)
            if with_normals:
                lines.append(f"f {i1}//{i1} {i2}//{i2} {i3}//{i3}")
            else:
                lines.append(f"f {i1} {i2} {i3}")
        return "".join(line + "\n" for line in lines)