from ellipsoid_sections.cli import main

raise SystemExit(main())
