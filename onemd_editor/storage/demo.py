from __future__ import annotations

from dataclasses import dataclass, field

from onemd_editor.logging_setup import log
from onemd_editor.settings import IMAGES_DIRNAME, NOTE_FILENAME
from onemd_editor.storage.filesystem import ensure_dir, write_if_absent
from onemd_editor.storage.root import RootResolver

SAMPLE_NOTEBOOK = "Sample Notebook"
SAMPLE_NOTE_NAME = "Welcome"
SAMPLE_IMAGE_NAME = "sample.png"

SAMPLE_NOTE = """\
# Welcome to OneMDEditor

- Notebook / Note three-pane layout
- WYSIWYG markdown editing
- Images are stored in the note's images/ folder and referenced by relative path

```js
console.log('Hello Milkdown');
```

![Sample image](images/sample.png)
"""

# 1x1 RGBA PNG
SAMPLE_PNG = bytes([
    0x89, 0x50, 0x4E, 0x47, 0x0D, 0x0A, 0x1A, 0x0A, 0x00, 0x00, 0x00, 0x0D, 0x49, 0x48, 0x44, 0x52,
    0x00, 0x00, 0x00, 0x01, 0x00, 0x00, 0x00, 0x01, 0x08, 0x06, 0x00, 0x00, 0x00, 0x1F, 0x15, 0xC4,
    0x89, 0x00, 0x00, 0x00, 0x10, 0x49, 0x44, 0x41, 0x54, 0x78, 0xDA, 0x63, 0xFC, 0xFF, 0x9F, 0xA1,
    0x1E, 0x00, 0x07, 0x82, 0x02, 0x7F, 0x3F, 0x83, 0x79, 0xCF, 0x00, 0x00, 0x00, 0x00, 0x49, 0x45,
    0x4E, 0x44, 0xAE, 0x42, 0x60, 0x82,
])


@dataclass(frozen=True)
class DemoSeeder:
    """
    Materializes one sample notebook / note / image on first run.

    Safe to call on every startup: existing files, including an edited
    sample note, are left alone.
    """

    resolver: RootResolver = field(default_factory=RootResolver)

    def ensure_demo_data(self) -> None:
        root = self.resolver.ensure()
        log.info("ensure_demo_data root=%s", root)

        note_dir = ensure_dir(root / SAMPLE_NOTEBOOK / SAMPLE_NOTE_NAME, action="create sample note")
        if write_if_absent(note_dir / NOTE_FILENAME, SAMPLE_NOTE.encode("utf-8"), action="write sample note"):
            log.info("Sample note written: %s", note_dir)

        image_dir = ensure_dir(note_dir / IMAGES_DIRNAME, action="create sample images folder")
        write_if_absent(image_dir / SAMPLE_IMAGE_NAME, SAMPLE_PNG, action="write sample image")
