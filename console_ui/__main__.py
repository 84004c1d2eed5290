from console_ui.main import main

raise SystemExit(main())
