SAMPLE_ARTICLES = [
    {
        "title": "Intro to LWC",
        "desc": "basics",
        "tags": ["beginner"],
        "url": "articles/intro-to-lwc.html",
    },
    {
        "title": "Advanced Patterns",
        "desc": "LWC deep dive",
        "tags": ["advanced", "lwc"],
        "url": "articles/advanced-patterns.html",
    },
    {
        "title": "Lightning Data Service in Practice",
        "desc": "Read and write records with getRecord, updateRecord and the UI API without Apex.",
        "tags": ["lds", "data", "wire"],
        "url": "articles/lightning-data-service.html",
    },
    {
        "title": "The @wire Decorator Explained",
        "desc": "How reactive wire adapters provision data and when to call Apex imperatively instead.",
        "tags": ["wire", "apex", "reactivity"],
        "url": "articles/wire-decorator.html",
    },
    {
        "title": "Component Communication",
        "desc": "Parent to child with @api, child to parent with custom events, siblings with Lightning Message Service.",
        "tags": ["events", "api", "lms"],
        "url": "articles/component-communication.html",
    },
    {
        "title": "Testing Components with Jest",
        "desc": "Set up sfdx-lwc-jest, mock wire adapters and flush promises in DOM assertions.",
        "tags": ["testing", "jest"],
        "url": "articles/jest-testing.html",
    },
    {
        "title": "Styling with SLDS Hooks",
        "desc": "Styling hooks, CSS custom properties and the shadow DOM boundary.",
        "tags": ["css", "slds", "styling"],
        "url": "articles/slds-styling-hooks.html",
    },
    {
        "title": "Lifecycle Hooks",
        "desc": "constructor, connectedCallback, renderedCallback and disconnectedCallback in order.",
        "tags": ["lifecycle", "beginner"],
        "url": "articles/lifecycle-hooks.html",
    },
    {
        "title": "Navigation Service",
        "desc": "Use NavigationMixin to move between record pages, tabs and URLs.",
        "tags": ["navigation"],
        "url": "articles/navigation-service.html",
    },
    {
        "title": "Performance Checklist",
        "desc": "Lazy rendering, caching wire results and avoiding rerender loops.",
        "tags": ["performance", "advanced"],
        "url": "articles/performance-checklist.html",
    },
]
