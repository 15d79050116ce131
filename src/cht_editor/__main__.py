from cht_editor.cli.main import main

raise SystemExit(main())
