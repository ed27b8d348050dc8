from onemd_editor.main import main

raise SystemExit(main())
